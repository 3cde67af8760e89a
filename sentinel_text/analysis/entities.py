"""Capitalization-based entity extraction."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field

CAPITALIZED_RUN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")

# Plain substring checks: "Corporate Affairs" counts as an organization.
ORG_SUFFIXES: tuple[str, ...] = ("Inc", "Corp", "LLC", "Ltd", "Company", "Organization")


@dataclass
class EntityBundle:
    """Surface forms found in a text, in encounter order."""

    people: list[str] = field(default_factory=list)
    organizations: list[str] = field(default_factory=list)
    # Never filled by the capitalization heuristic.
    locations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return asdict(self)

    def is_empty(self) -> bool:
        return not (self.people or self.organizations or self.locations)


def is_organization(candidate: str, suffixes: tuple[str, ...] = ORG_SUFFIXES) -> bool:
    return any(suffix in candidate for suffix in suffixes)


def extract_entities(text: str) -> EntityBundle:
    """Classify runs of capitalized words as organizations or people.

    Single capitalized words that carry no organizational suffix are dropped,
    so place names such as "Paris" never show up.
    """
    entities = EntityBundle()
    for match in CAPITALIZED_RUN.finditer(text or ""):
        candidate = match.group(0)
        if is_organization(candidate):
            entities.organizations.append(candidate)
        elif len(candidate.split()) >= 2:
            entities.people.append(candidate)
    return entities
