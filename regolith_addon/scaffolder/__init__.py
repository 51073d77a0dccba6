"""Regolith add-on scaffolder -- plans and writes new add-on projects.

Planning is pure: answers go in, a list of directory and file operations
comes out.  Executing the plan is a separate step.

Quick usage::

    from regolith_addon.scaffolder import Answers, PlanExecutor, plan

    answers = Answers(
        project_name="My Addon",
        target_version="1.20.0",
        scripting_language="ts",
    )
    project_plan = plan(answers)
    project_path = await PlanExecutor("/tmp/output").execute(project_plan)
"""

from .answers import Answers, ScriptingLanguage
from .executor import PlanExecutionError, PlanExecutor
from .plan import FileSystemPlan, MakeDirectory, WriteFile
from .planner import ProjectPlanner, plan
from .validators import (
    InvalidAnswerError,
    InvalidNameError,
    InvalidVersionError,
    check_reserved_name,
    sanitize_name,
    validate_project_name,
    validate_target_version,
)

__all__ = [
    "Answers",
    "FileSystemPlan",
    "InvalidAnswerError",
    "InvalidNameError",
    "InvalidVersionError",
    "MakeDirectory",
    "PlanExecutionError",
    "PlanExecutor",
    "ProjectPlanner",
    "ScriptingLanguage",
    "WriteFile",
    "check_reserved_name",
    "plan",
    "sanitize_name",
    "validate_project_name",
    "validate_target_version",
]
