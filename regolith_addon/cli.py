"""create-regolith-addon command line interface.

A better alternative to ``regolith init``: asks a handful of questions (or
takes the answers as flags) and writes a ready-to-build Regolith add-on.

Usage::

    create-regolith-addon
    create-regolith-addon --dry
    create-regolith-addon --name "My Addon" --target-version 1.20.0 \\
        --no-resource-pack --scripting ts --local-filters --eslint --prettier
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from . import __version__
from .config import Config
from .prompts import collect_answers
from .scaffolder.answers import ScriptingLanguage
from .scaffolder.executor import PlanExecutionError, PlanExecutor
from .scaffolder.planner import ProjectPlanner
from .scaffolder.validators import InvalidAnswerError
from .utils import highlight_path, log, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-regolith-addon",
        description="A better alternative to `regolith init`",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-regolith-addon\n"
            "  create-regolith-addon --dry\n"
            "  create-regolith-addon --name my-addon --target-version 1.20.0 --scripting js\n"
        ),
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--dry", action="store_true", help="dry run")
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read REGOLITH_ADDON_* environment variables)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )

    answers = parser.add_argument_group("answers", "Skip the matching prompt")
    answers.add_argument("--name", dest="project_name", help="Project name")
    answers.add_argument(
        "--target-version",
        help="Target Minecraft version, x.y.z (or x.y.z.t for a preview)",
    )
    answers.add_argument(
        "--resource-pack",
        dest="include_resource_pack",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include a resource pack",
    )
    answers.add_argument(
        "--scripting",
        dest="scripting_language",
        choices=[lang.value for lang in ScriptingLanguage],
        help="Scripting language",
    )
    answers.add_argument(
        "--local-filters",
        dest="include_local_filters",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Set up a subdirectory for local Node.js filters (scripting only)",
    )
    answers.add_argument(
        "--eslint",
        dest="include_eslint",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include ESLint (scripting only)",
    )
    answers.add_argument(
        "--prettier",
        dest="include_prettier",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include Prettier",
    )
    return parser


_ANSWER_FIELDS = (
    "project_name",
    "include_resource_pack",
    "target_version",
    "scripting_language",
    "include_local_filters",
    "include_eslint",
    "include_prettier",
)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-regolith-addon`` / ``python -m regolith_addon``."""
    args = build_parser().parse_args(argv)
    try:
        _run(args)
    except Exception as exc:
        print_error(str(exc))
        sys.exit(1)


def _run(args: argparse.Namespace) -> None:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.output is not None:
        config.output_dir = Path(args.output)
    if args.dry:
        config.dry_run = True

    try:
        answers = collect_answers({field: getattr(args, field) for field in _ANSWER_FIELDS})
    except InvalidAnswerError as exc:
        print_error(exc.reason)
        sys.exit(1)

    plan = ProjectPlanner(config).plan(answers)
    executor = PlanExecutor(config.output_dir, dry_run=config.dry_run)
    try:
        project_root = asyncio.run(executor.execute(plan))
    except PlanExecutionError as exc:
        print_error(str(exc))
        sys.exit(1)

    log("success", f"created a new add-on at {highlight_path(project_root)}")

    if config.dry_run:
        print_summary_table(
            {
                "Directories": str(len(plan.directories)),
                "Files": str(len(plan.files)),
            },
            title="Dry run",
        )
        print_success("completed dry run")


if __name__ == "__main__":
    main()
