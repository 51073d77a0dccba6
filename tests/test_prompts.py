"""Tests for interactive answer collection (regolith_addon.prompts)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from regolith_addon.prompts import collect_answers
from regolith_addon.scaffolder.answers import ScriptingLanguage
from regolith_addon.scaffolder.validators import InvalidNameError, InvalidVersionError

pytestmark = pytest.mark.unit


class TestCollectAnswers:
    def test_everything_prompted(self):
        with patch("regolith_addon.prompts.Prompt.ask", side_effect=["My Addon", "1.20.0", "ts"]) as ask, \
                patch("regolith_addon.prompts.Confirm.ask", side_effect=[True, True, False, True]) as confirm:
            answers = collect_answers()

        assert answers.project_name == "My Addon"
        assert answers.include_resource_pack is True
        assert answers.target_version == "1.20.0"
        assert answers.scripting_language is ScriptingLanguage.TYPESCRIPT
        assert answers.include_local_filters is True
        assert answers.include_eslint is False
        assert answers.include_prettier is True
        assert ask.call_count == 3
        assert confirm.call_count == 4

    def test_scripting_questions_skipped_without_scripting(self):
        with patch("regolith_addon.prompts.Prompt.ask", side_effect=["addon", "1.20.0", "none"]), \
                patch("regolith_addon.prompts.Confirm.ask", side_effect=[False, True]) as confirm:
            answers = collect_answers()

        assert confirm.call_count == 2
        assert answers.include_local_filters is False
        assert answers.include_eslint is False
        assert answers.include_prettier is True

    def test_invalid_name_reasked(self, capsys):
        with patch(
            "regolith_addon.prompts.Prompt.ask",
            side_effect=["", "CON", "addon.", "addon", "1.20.0", "js"],
        ) as ask, patch("regolith_addon.prompts.Confirm.ask", return_value=False):
            answers = collect_answers()

        assert answers.project_name == "addon"
        assert ask.call_count == 6
        err = capsys.readouterr().err
        assert "Must be at least one character" in err
        assert "illegal file name" in err
        assert "Cannot end with space" in err

    def test_invalid_version_reasked(self, capsys):
        with patch(
            "regolith_addon.prompts.Prompt.ask",
            side_effect=["addon", "1.20", "1.x.0", "1.20.0.3", "none"],
        ), patch("regolith_addon.prompts.Confirm.ask", return_value=False):
            answers = collect_answers()

        assert answers.target_version == "1.20.0.3"
        assert capsys.readouterr().err.count("Must be in `x.y.z`") == 2

    def test_presets_skip_prompts(self):
        presets = {
            "project_name": "addon",
            "include_resource_pack": True,
            "target_version": "1.21.0",
            "scripting_language": "js",
            "include_local_filters": False,
            "include_eslint": True,
            "include_prettier": False,
        }
        with patch("regolith_addon.prompts.Prompt.ask") as ask, \
                patch("regolith_addon.prompts.Confirm.ask") as confirm:
            answers = collect_answers(presets)

        ask.assert_not_called()
        confirm.assert_not_called()
        assert answers.include_eslint is True
        assert answers.scripting_language is ScriptingLanguage.JAVASCRIPT

    def test_none_presets_are_prompted(self):
        presets = {"project_name": "addon", "include_resource_pack": None}
        with patch("regolith_addon.prompts.Prompt.ask", side_effect=["1.20.0", "none"]), \
                patch("regolith_addon.prompts.Confirm.ask", side_effect=[True, False]):
            answers = collect_answers(presets)

        assert answers.include_resource_pack is True

    def test_scripting_flags_ignored_without_scripting(self):
        presets = {
            "project_name": "addon",
            "include_resource_pack": False,
            "target_version": "1.20.0",
            "scripting_language": "none",
            "include_local_filters": True,
            "include_eslint": True,
            "include_prettier": False,
        }
        answers = collect_answers(presets)
        assert answers.include_local_filters is False
        assert answers.include_eslint is False

    def test_invalid_preset_name_raises(self):
        with pytest.raises(InvalidNameError):
            collect_answers({"project_name": "lpt1"})

    def test_invalid_preset_version_raises(self):
        with patch("regolith_addon.prompts.Confirm.ask", return_value=False):
            with pytest.raises(InvalidVersionError):
                collect_answers({"project_name": "addon", "target_version": "1.2"})
