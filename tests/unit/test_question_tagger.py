"""
Unit tests for QuestionTagger.
"""
import pytest

from app.models.question_models import QuestionTag
from app.services.question_tagger import DEFAULT_CONFIG_PATH, DEFAULT_KEYWORDS, QuestionTagger


class TestQuestionTagger:
    """Test cases for keyword tagging."""

    @pytest.fixture
    def tagger(self):
        return QuestionTagger()

    @pytest.mark.unit
    def test_behavioral_question(self, tagger):
        """Verify a classic behavioral prompt is tagged behavioral only."""
        tags = tagger.tag("Tell me about a time you disagreed with a teammate.")
        assert tags == (QuestionTag.BEHAVIORAL,)

    @pytest.mark.unit
    def test_multiple_tags_in_vocabulary_order(self, tagger):
        """Verify several tags come back in vocabulary order."""
        tags = tagger.tag("How would you design a database schema for this role?")
        assert tags == (QuestionTag.TECHNICAL, QuestionTag.ROLE_SPECIFIC)

    @pytest.mark.unit
    def test_keywords_match_at_word_start(self, tagger):
        """Verify 'api' does not fire inside 'rapid'."""
        tags = tagger.tag("How do you handle rapid change?")
        assert QuestionTag.TECHNICAL not in tags
        assert QuestionTag.BEHAVIORAL in tags

    @pytest.mark.unit
    def test_untagged_question(self, tagger):
        """Verify a question with no keywords gets no tags."""
        assert tagger.tag("Where did you grow up?") == ()

    @pytest.mark.unit
    def test_company_name_marks_company_specific(self):
        """Verify the company name counts as a company-specific keyword."""
        tagger = QuestionTagger(company="Acme")
        assert tagger("Why Acme over its competitors?") == (QuestionTag.COMPANY_SPECIFIC,)

    @pytest.mark.unit
    def test_position_name_marks_role_specific(self):
        """Verify the position title counts as a role-specific keyword."""
        tagger = QuestionTagger(position="Data Engineer")
        assert tagger("What does a great Data Engineer deliver in a quarter?") == (QuestionTag.ROLE_SPECIFIC,)

    @pytest.mark.unit
    def test_for_context_shares_patterns_and_sets_names(self):
        """Verify a context tagger reuses compiled patterns with its own company and position."""
        base = QuestionTagger()
        tagger = base.for_context(company="Acme", position="Data Engineer")

        assert tagger.compiled_patterns is base.compiled_patterns
        assert tagger("Why Acme over its competitors?") == (QuestionTag.COMPANY_SPECIFIC,)
        assert tagger("What does a great Data Engineer deliver in a quarter?") == (QuestionTag.ROLE_SPECIFIC,)
        assert base("Why Acme over its competitors?") == ()


class TestQuestionTaggerConfig:
    """Test cases for YAML keyword loading."""

    @pytest.mark.unit
    def test_bundled_config_file_exists(self):
        """Verify the default keyword file ships with the project."""
        assert DEFAULT_CONFIG_PATH.exists()

    @pytest.mark.unit
    def test_custom_config_replaces_tag_keywords(self, tmp_path):
        """Verify a config file overrides the keywords for the tags it names."""
        config = tmp_path / "tags.yaml"
        config.write_text("question_tags:\n  technical:\n    - Kubernetes\n")

        tagger = QuestionTagger(config_path=str(config))

        assert tagger.keywords["technical"] == ["kubernetes"]
        assert tagger.keywords["behavioral"] == DEFAULT_KEYWORDS["behavioral"]
        assert QuestionTag.TECHNICAL in tagger.tag("Have you run Kubernetes in production?")
        assert QuestionTag.TECHNICAL not in tagger.tag("Which database do you prefer?")

    @pytest.mark.unit
    def test_unknown_tags_are_ignored(self, tmp_path):
        """Verify tags outside the vocabulary are dropped."""
        config = tmp_path / "tags.yaml"
        config.write_text("question_tags:\n  misc:\n    - anything\n  behavioral:\n    - teamwork\n")

        tagger = QuestionTagger(config_path=str(config))

        assert "misc" not in tagger.keywords
        assert tagger.keywords["behavioral"] == ["teamwork"]

    @pytest.mark.unit
    def test_invalid_yaml_falls_back(self, tmp_path):
        """Verify a broken config file does not prevent tagging."""
        config = tmp_path / "tags.yaml"
        config.write_text("question_tags: [unclosed\n")

        tagger = QuestionTagger(config_path=str(config))

        assert "database" in tagger.keywords["technical"]

    @pytest.mark.unit
    def test_missing_config_path_falls_back(self, tmp_path):
        """Verify a missing config path falls back to the bundled keywords."""
        tagger = QuestionTagger(config_path=str(tmp_path / "missing.yaml"))
        assert set(tagger.keywords) == {tag.value for tag in QuestionTag}
