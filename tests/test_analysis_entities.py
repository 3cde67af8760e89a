"""
Tests for capitalization-based entity extraction.
"""

from sentinel_text.analysis.entities import EntityBundle, extract_entities, is_organization


class TestExtractEntities:
    """Test the people/organization heuristic."""

    def test_people_and_organizations(self):
        entities = extract_entities("John Smith works at Acme Corp in Paris")

        assert entities.people == ["John Smith"]
        assert entities.organizations == ["Acme Corp"]
        # Single capitalized words are discarded; locations stay empty.
        assert entities.locations == []

    def test_empty_text(self):
        entities = extract_entities("")

        assert entities == EntityBundle()
        assert entities.is_empty()

    def test_single_words_are_dropped(self):
        assert extract_entities("Paris and London and Berlin").is_empty()

    def test_suffix_match_is_substring_based(self):
        entities = extract_entities("Corporate Affairs hired Incredible staff")

        assert entities.organizations == ["Corporate Affairs", "Incredible"]
        assert entities.people == []

    def test_repeated_mentions_are_kept(self):
        entities = extract_entities("Jane Doe met Bob Stone, then Jane Doe left.")

        assert entities.people == ["Jane Doe", "Bob Stone", "Jane Doe"]

    def test_all_caps_words_are_not_candidates(self):
        assert extract_entities("NASA and IBM LLC").is_empty()

    def test_non_ascii_text(self):
        assert extract_entities("привет мир 你好 !!! ...").is_empty()

    def test_to_dict(self):
        bundle = extract_entities("Globex Company hired Hank Scorpio")

        assert bundle.to_dict() == {
            "people": ["Hank Scorpio"],
            "organizations": ["Globex Company"],
            "locations": [],
        }


def test_is_organization():
    assert is_organization("Initech LLC")
    assert is_organization("World Health Organization")
    assert not is_organization("Jane Doe")
