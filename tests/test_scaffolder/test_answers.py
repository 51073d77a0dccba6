"""Tests for the Answers model (regolith_addon.scaffolder.answers)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from regolith_addon.scaffolder.answers import Answers, ScriptingLanguage

pytestmark = pytest.mark.unit


class TestConstruction:
    def test_defaults(self):
        answers = Answers(project_name="addon", target_version="1.20.0")
        assert answers.include_resource_pack is False
        assert answers.scripting_language is ScriptingLanguage.NONE
        assert answers.include_prettier is False

    def test_language_from_string(self):
        answers = Answers(project_name="addon", target_version="1.20.0", scripting_language="ts")
        assert answers.scripting_language is ScriptingLanguage.TYPESCRIPT

    def test_unknown_language_rejected(self):
        with pytest.raises(ValidationError):
            Answers(project_name="addon", target_version="1.20.0", scripting_language="lua")

    def test_invalid_name_rejected(self):
        with pytest.raises(ValidationError, match="Cannot end with"):
            Answers(project_name="addon.", target_version="1.20.0")

    def test_reserved_name_rejected(self):
        with pytest.raises(ValidationError, match="illegal file name"):
            Answers(project_name="aux", target_version="1.20.0")

    def test_invalid_version_rejected(self):
        with pytest.raises(ValidationError, match="x.y.z"):
            Answers(project_name="addon", target_version="1.20")

    def test_overlong_version_component_rejected(self):
        with pytest.raises(ValidationError, match="x.y.z"):
            Answers(project_name="addon", target_version="1" * 5000 + ".0.0")

    def test_frozen(self, minimal_answers):
        with pytest.raises(ValidationError):
            minimal_answers.project_name = "other"


class TestNormalisation:
    def test_scripting_only_options_cleared_without_scripting(self, make_answers):
        answers = make_answers(
            scripting_language="none", include_local_filters=True, include_eslint=True
        )
        assert answers.include_local_filters is False
        assert answers.include_eslint is False

    def test_enum_value_also_normalised(self, make_answers):
        answers = make_answers(
            scripting_language=ScriptingLanguage.NONE, include_local_filters=True
        )
        assert answers.include_local_filters is False

    def test_options_kept_with_scripting(self, make_answers):
        answers = make_answers(
            scripting_language="js", include_local_filters=True, include_eslint=True
        )
        assert answers.include_local_filters is True
        assert answers.include_eslint is True

    def test_prettier_independent_of_scripting(self, make_answers):
        assert make_answers(include_prettier=True).include_prettier is True


class TestDerivedValues:
    def test_base_dir_name_sanitized(self, make_answers):
        answers = make_answers(project_name="Cool: Addon v1.2")
        assert answers.base_dir_name == "Cool- Addon v1-2"
        assert answers.project_name == "Cool: Addon v1.2"

    def test_release_version(self, make_answers):
        answers = make_answers(target_version="1.20.0")
        assert answers.min_engine_version == [1, 20, 0]
        assert answers.is_targeting_preview is False

    def test_preview_version_strips_fourth_component(self, make_answers):
        answers = make_answers(target_version="1.20.0.1")
        assert answers.min_engine_version == [1, 20, 0]
        assert answers.is_targeting_preview is True

    def test_leading_zeros_parsed_as_ints(self, make_answers):
        assert make_answers(target_version="01.020.0").min_engine_version == [1, 20, 0]

    @pytest.mark.parametrize(
        "language, scripting, typescript, index",
        [
            ("js", True, False, "index.js"),
            ("ts", True, True, "index.ts"),
            ("none", False, False, "index.js"),
        ],
    )
    def test_language_flags(self, make_answers, language, scripting, typescript, index):
        answers = make_answers(scripting_language=language)
        assert answers.use_scripting is scripting
        assert answers.use_typescript is typescript
        assert answers.index_script_name == index
