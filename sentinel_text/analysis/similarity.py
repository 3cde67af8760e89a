"""Token-set (Jaccard) similarity between documents."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def token_set(text: str) -> frozenset[str]:
    """Lowercased whitespace tokens of ``text``."""
    return frozenset((text or "").lower().split())


def similarity(text_a: str, text_b: str) -> float:
    """Jaccard index of the two texts' token sets; 0.0 when both are empty."""
    tokens_a = token_set(text_a)
    tokens_b = token_set(text_b)
    union = tokens_a | tokens_b
    if not union:
        return 0.0
    return len(tokens_a & tokens_b) / len(union)


def similarity_matrix(texts: Sequence[str]) -> np.ndarray:
    """Pairwise Jaccard similarity for a corpus as an ``(n, n)`` float array.

    Each text becomes a binary row over the shared vocabulary; intersections
    fall out of one matrix product and unions from the row sizes.
    """
    n = len(texts)
    if n == 0:
        return np.zeros((0, 0), dtype="float64")

    sets = [token_set(t) for t in texts]
    vocab: dict[str, int] = {}
    for tokens in sets:
        for tok in tokens:
            vocab.setdefault(tok, len(vocab))

    incidence = np.zeros((n, len(vocab)), dtype="float64")
    for row, tokens in enumerate(sets):
        for tok in tokens:
            incidence[row, vocab[tok]] = 1.0

    intersections = incidence @ incidence.T
    sizes = incidence.sum(axis=1)
    unions = sizes[:, None] + sizes[None, :] - intersections
    scores = np.zeros((n, n), dtype="float64")
    np.divide(intersections, unions, out=scores, where=unions > 0)
    return scores


def rank_related(
    target: str,
    candidates: Sequence[str],
    top_k: int = 5,
    min_score: float = 0.0,
) -> list[tuple[int, float]]:
    """Rank ``candidates`` by similarity to ``target``.

    Returns ``(index, score)`` pairs, best first, keeping only scores above
    ``min_score``. Equal scores keep candidate order.
    """
    if top_k <= 0 or not candidates:
        return []

    scores = np.asarray([similarity(target, c) for c in candidates], dtype="float64")
    order = np.argsort(-scores, kind="stable")
    ranked: list[tuple[int, float]] = []
    for idx in order:
        score = float(scores[idx])
        if score <= min_score:
            break
        ranked.append((int(idx), score))
        if len(ranked) >= top_k:
            break
    logger.debug("Ranked %d of %d candidates as related", len(ranked), len(candidates))
    return ranked
