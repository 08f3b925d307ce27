"""Unit tests for entity extraction."""

import pytest
from prdtree.parser.extractors import (
    ACTOR_KEYWORDS,
    SYSTEM_KEYWORDS,
    FEATURE_KEYWORDS,
    extract_entities,
    annotate_sections,
)
from prdtree.parser.models import EntityBundle, Section


class TestVocabularies:
    """Tests for the keyword vocabularies."""

    def test_are_lower_case(self):
        for keyword in ACTOR_KEYWORDS + SYSTEM_KEYWORDS + FEATURE_KEYWORDS:
            assert keyword == keyword.lower()

    def test_are_immutable(self):
        assert isinstance(ACTOR_KEYWORDS, tuple)
        assert isinstance(SYSTEM_KEYWORDS, tuple)
        assert isinstance(FEATURE_KEYWORDS, tuple)

    def test_include_indonesian_terms(self):
        assert "pengguna" in ACTOR_KEYWORDS
        assert "sistem" in SYSTEM_KEYWORDS
        assert "fitur" in FEATURE_KEYWORDS
        assert "fungsi" in FEATURE_KEYWORDS


class TestExtractEntities:
    """Tests for extract_entities."""

    def test_empty_content(self):
        assert extract_entities("") == EntityBundle(actors=[], systems=[], features=[])

    def test_none_content(self):
        assert extract_entities(None).is_empty

    def test_actors(self):
        result = extract_entities("The user will interact with the admin and developer")
        assert result.actors == ["user", "admin", "developer"]

    def test_systems(self):
        result = extract_entities("The system will use a database and API service")
        assert result.systems == ["system", "database", "api", "service"]

    def test_features(self):
        result = extract_entities("This feature includes a module and function component")
        assert result.features == ["feature", "module", "function"]

    def test_case_insensitive_and_lower_cased(self):
        result = extract_entities("The USER will access the SYSTEM through a FEATURE")

        assert result.actors == ["user"]
        assert result.systems == ["system"]
        assert result.features == ["feature"]

    def test_duplicates_removed(self):
        result = extract_entities("user User USER system system feature feature")

        assert result.actors == ["user"]
        assert result.systems == ["system"]
        assert result.features == ["feature"]

    def test_first_occurrence_order(self):
        result = extract_entities("database first, then server, then database again, then api")
        assert result.systems == ["database", "server", "api"]

    def test_indonesian_keywords(self):
        result = extract_entities("Pengguna akan menggunakan sistem dengan fitur dan fungsi")

        assert result.actors == ["pengguna"]
        assert result.systems == ["sistem"]
        assert result.features == ["fitur", "fungsi"]

    @pytest.mark.parametrize("text", [
        "users log in",
        "the userland tools",
        "several apis",
        "systemd unit",
        "a functional requirement",
        "user_id column",
    ])
    def test_whole_word_only(self, text):
        assert extract_entities(text).is_empty

    def test_administrator_and_admin_are_distinct(self):
        result = extract_entities("The administrator delegates to an admin")
        assert result.actors == ["administrator", "admin"]

    def test_punctuation_boundaries(self):
        result = extract_entities("(user), api-driven; [module].")

        assert result.actors == ["user"]
        assert result.systems == ["api"]
        assert result.features == ["module"]

    def test_unicode_case_folding_variants_rejected(self):
        result = extract_entities("The ſyſtem and the KOMPONEN and apı")

        assert result.systems == []
        assert result.features == ["komponen"]

    def test_matches_stay_within_vocabulary(self):
        result = extract_entities("ſerver ADMİN uſer Database fıtur")

        assert set(result.actors) <= set(ACTOR_KEYWORDS)
        assert set(result.systems) <= set(SYSTEM_KEYWORDS)
        assert set(result.features) <= set(FEATURE_KEYWORDS)
        assert result.systems == ["database"]

    def test_no_matches_gives_empty_lists(self):
        result = extract_entities("Nothing relevant here at all.")

        assert result.actors == []
        assert result.systems == []
        assert result.features == []


class TestAnnotateSections:
    """Tests for annotate_sections."""

    def test_attaches_entities_without_mutating_input(self):
        original = Section(id="1", title="Login", level=1, content="The user logs into the system.")
        annotated = annotate_sections([original])

        assert original.entities.is_empty
        assert annotated[0].entities.actors == ["user"]
        assert annotated[0].entities.systems == ["system"]
        assert annotated[0].id == "1"
        assert annotated[0].title == "Login"

    def test_title_is_not_searched(self):
        section = Section(id="1", title="User management", level=1, content="")
        assert annotate_sections([section])[0].entities.is_empty

    def test_preserves_order(self):
        sections = [
            Section(id=str(i), title=f"T{i}", level=1, content="admin")
            for i in range(3)
        ]
        assert [s.id for s in annotate_sections(sections)] == ["0", "1", "2"]
