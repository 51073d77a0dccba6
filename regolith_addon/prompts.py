"""Interactive collection of scaffolding answers.

Answers already supplied on the command line are taken as-is (after
validation); every other answer is asked for with Rich prompts, in the same
order as the generated project is described: name, resource pack, target
version, scripting, then tooling.
"""

from __future__ import annotations

from typing import Any, Callable

from rich.prompt import Confirm, Prompt

from .scaffolder.answers import Answers, ScriptingLanguage
from .scaffolder.validators import (
    is_valid_project_name,
    is_valid_target_version,
    validate_answers_name,
    validate_target_version,
)
from .utils import console, print_error

SCRIPTING_CHOICES: dict[str, str] = {
    ScriptingLanguage.JAVASCRIPT.value: "JavaScript",
    ScriptingLanguage.TYPESCRIPT.value: "TypeScript",
    ScriptingLanguage.NONE.value: "No scripting",
}


def _ask_until_valid(message: str, check: Callable[[str], bool | str]) -> str:
    """Re-ask *message* until *check* returns ``True``; print each rejection."""
    while True:
        value = Prompt.ask(message, console=console)
        verdict = check(value)
        if verdict is True:
            return value
        print_error(str(verdict))


def _ask_scripting_language() -> ScriptingLanguage:
    legend = ", ".join(f"{key} = {label}" for key, label in SCRIPTING_CHOICES.items())
    value = Prompt.ask(
        f"Which scripting language to use? ({legend})",
        choices=list(SCRIPTING_CHOICES),
        default=ScriptingLanguage.JAVASCRIPT.value,
        console=console,
    )
    return ScriptingLanguage(value)


def _confirm(preset: bool | None, message: str) -> bool:
    if preset is not None:
        return preset
    return Confirm.ask(message, default=True, console=console)


def collect_answers(presets: dict[str, Any] | None = None) -> Answers:
    """Build validated :class:`Answers`, prompting for anything not preset.

    Args:
        presets: Answers already known, keyed by :class:`Answers` field name.
            ``None`` values count as missing.

    Raises:
        InvalidNameError: If a preset project name is invalid.
        InvalidVersionError: If a preset target version is invalid.
    """
    presets = {k: v for k, v in (presets or {}).items() if v is not None}

    if "project_name" in presets:
        validate_answers_name(presets["project_name"])
        project_name = presets["project_name"]
    else:
        project_name = _ask_until_valid("What's your project name?", is_valid_project_name)

    include_resource_pack = _confirm(
        presets.get("include_resource_pack"), "Include a resource pack?"
    )

    if "target_version" in presets:
        validate_target_version(presets["target_version"])
        target_version = presets["target_version"]
    else:
        target_version = _ask_until_valid(
            "What's your target Minecraft version?", is_valid_target_version
        )

    if "scripting_language" in presets:
        scripting_language = ScriptingLanguage(presets["scripting_language"])
    else:
        scripting_language = _ask_scripting_language()

    include_local_filters = False
    include_eslint = False
    if scripting_language is not ScriptingLanguage.NONE:
        include_local_filters = _confirm(
            presets.get("include_local_filters"),
            "Set up a subdirectory for local Node.js filters?",
        )
        include_eslint = _confirm(
            presets.get("include_eslint"), "Include ESLint to find script problems?"
        )

    include_prettier = _confirm(
        presets.get("include_prettier"), "Include Prettier for code formatting?"
    )

    return Answers(
        project_name=project_name,
        include_resource_pack=include_resource_pack,
        target_version=target_version,
        scripting_language=scripting_language,
        include_local_filters=include_local_filters,
        include_eslint=include_eslint,
        include_prettier=include_prettier,
    )
