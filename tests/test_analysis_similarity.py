import numpy as np
import pytest

from sentinel_text.analysis.similarity import rank_related, similarity, similarity_matrix


def test_identical_texts_score_one():
    assert similarity("the cat sat", "the cat sat") == 1.0


def test_empty_and_whitespace_texts_score_zero():
    assert similarity("", "") == 0.0
    assert similarity("   \n\t", " ") == 0.0
    assert similarity("", "something") == 0.0


def test_jaccard_value_and_symmetry():
    assert similarity("a b", "b c") == pytest.approx(1 / 3)
    assert similarity("a b", "b c") == similarity("b c", "a b")


def test_case_and_duplicates_are_ignored():
    assert similarity("Apple apple APPLE", "apple") == 1.0


def test_punctuation_is_part_of_tokens():
    assert similarity("done.", "done") == 0.0


class TestSimilarityMatrix:
    """Test pairwise corpus similarity."""

    def test_empty_corpus(self):
        assert similarity_matrix([]).shape == (0, 0)

    def test_matches_pairwise_similarity(self):
        texts = ["the cat sat", "cat sat on the mat", "dogs bark", ""]
        matrix = similarity_matrix(texts)

        assert matrix.shape == (4, 4)
        np.testing.assert_allclose(matrix, matrix.T)
        for i, a in enumerate(texts):
            for j, b in enumerate(texts):
                assert matrix[i, j] == pytest.approx(similarity(a, b))

    def test_diagonal(self):
        matrix = similarity_matrix(["alpha beta", ""])

        assert matrix[0, 0] == 1.0
        assert matrix[1, 1] == 0.0


class TestRankRelated:
    """Test related-document ranking."""

    def test_best_first_and_zero_scores_dropped(self):
        candidates = ["unrelated words", "the cat sat", "cat sat on mat"]

        ranked = rank_related("the cat sat", candidates)

        assert [idx for idx, _ in ranked] == [1, 2]
        assert ranked[0][1] == 1.0
        assert ranked[1][1] == pytest.approx(2 / 5)

    def test_top_k_and_min_score(self):
        candidates = ["the cat sat", "cat sat on mat", "cat"]

        assert rank_related("the cat sat", candidates, top_k=1) == [(0, 1.0)]
        assert [i for i, _ in rank_related("the cat sat", candidates, min_score=0.5)] == [0]

    def test_ties_keep_candidate_order(self):
        ranked = rank_related("a b", ["a b", "b a", "a"])

        assert [idx for idx, _ in ranked] == [0, 1, 2]

    def test_degenerate_inputs(self):
        assert rank_related("x", []) == []
        assert rank_related("x", ["x"], top_k=0) == []
        assert rank_related("", ["", ""]) == []
