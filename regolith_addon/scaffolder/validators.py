"""Validation and normalisation of user answers.

Every function in this module is pure.  The ``validate_*`` / ``check_*``
functions raise an :class:`InvalidAnswerError` subclass with a human-readable
reason; the ``is_valid_*`` variants return ``True`` or that reason instead,
which is the shape an interactive prompt needs to decide whether to re-ask.
"""

from __future__ import annotations

import re


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidAnswerError(ValueError):
    """Raised when a user answer cannot be used to scaffold a project."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class InvalidNameError(InvalidAnswerError):
    """The project name is empty, badly terminated, or a reserved device name."""


class InvalidVersionError(InvalidAnswerError):
    """The target version is not in ``x.y.z`` or ``x.y.z.t`` format."""


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Characters that are illegal in Windows file names.  The dot is legal, but it
# is replaced as well so that reserved-name matching never has to care about
# file extensions.
_ILLEGAL_NAME_CHARS_RE = re.compile(r'[/\\:*?"<>|.]')

RESERVED_NAMES: frozenset[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

# At most nine digits per component, so int() never hits the digit limit.
_VERSION_COMPONENT_RE = re.compile(r"[0-9]{1,9}")


# ---------------------------------------------------------------------------
# Project name
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> None:
    """Reject empty names and names Windows cannot store as a directory."""
    if len(name) < 1:
        raise InvalidNameError("Must be at least one character")
    if name.endswith(" ") or name.endswith("."):
        raise InvalidNameError("Cannot end with space or '.'")


def sanitize_name(name: str) -> str:
    """Replace every illegal file-name character in *name* with ``-``.

    Examples::

        sanitize_name("My Addon") -> "My Addon"
        sanitize_name("a/b.c")    -> "a-b-c"
    """
    return _ILLEGAL_NAME_CHARS_RE.sub("-", name)


def check_reserved_name(name: str) -> None:
    """Reject *name* if it is a reserved Windows device name.

    The comparison is made against the whole name and is ASCII
    case-insensitive, so ``con`` is rejected while ``CON-`` and ``CONSOLE``
    are not.
    """
    if name.isascii() and name.upper() in RESERVED_NAMES:
        raise InvalidNameError(
            f'"{name}" is an illegal file name. Try giving your add-on another name'
        )


def validate_answers_name(name: str) -> str:
    """Run the full project-name pipeline and return the base directory name.

    Order: validate the raw name, sanitize it, then check the sanitized
    result against the reserved device names.
    """
    validate_project_name(name)
    base_name = sanitize_name(name)
    check_reserved_name(base_name)
    return base_name


def is_valid_project_name(name: str) -> bool | str:
    """Return ``True`` if *name* is usable, otherwise the rejection reason."""
    try:
        validate_answers_name(name)
    except InvalidNameError as exc:
        return exc.reason
    return True


# ---------------------------------------------------------------------------
# Target version
# ---------------------------------------------------------------------------


def validate_target_version(version: str) -> None:
    """Accept ``x.y.z`` or ``x.y.z.t`` where every component is an integer >= 0.

    Each component is at most nine digits long.
    """
    components = version.split(".")
    if len(components) not in (3, 4) or not all(
        _VERSION_COMPONENT_RE.fullmatch(c) for c in components
    ):
        raise InvalidVersionError(
            "Must be in `x.y.z` or `x.y.z.t` format where `x`, `y`, `z`, "
            "and `t` are integers"
        )


def is_valid_target_version(version: str) -> bool | str:
    """Return ``True`` if *version* is usable, otherwise the rejection reason."""
    try:
        validate_target_version(version)
    except InvalidVersionError as exc:
        return exc.reason
    return True
