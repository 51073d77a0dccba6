"""Project planner: turns validated answers into a filesystem plan.

The planner performs no I/O.  Given an :class:`Answers` value it returns a
:class:`FileSystemPlan` holding every directory to create and every file to
write, with fully rendered contents.  Only the pack identifiers vary between
two calls with the same answers, and the identifier source can be injected.
"""

from __future__ import annotations

import json
import uuid
from pathlib import PurePosixPath
from typing import Any, Callable

from ..config import Config
from .answers import Answers
from .documents import (
    build_bp_manifest,
    build_eslint_config,
    build_filters_package_json,
    build_filters_tsconfig,
    build_languages_json,
    build_package_json,
    build_regolith_config,
    build_rp_manifest,
    build_tsconfig,
    to_json,
)
from .plan import FileSystemPlan, MakeDirectory, Operation, WriteFile
from .templates import TemplateRenderer

UuidFactory = Callable[[], Any]

# Working directory of filters during a Regolith run.
REGOLITH_TMP_DIR = ".regolith/tmp"


class _PlanBuilder:
    """Collects operations for a single :func:`plan` call."""

    def __init__(self, base_dir: PurePosixPath) -> None:
        self.base_dir = base_dir
        self.operations: list[Operation] = []

    def make_dir(self, relative: str | None = None) -> PurePosixPath:
        path = self.base_dir / relative if relative else self.base_dir
        self.operations.append(MakeDirectory(path))
        return path

    def write(self, relative: str, content: str) -> None:
        self.operations.append(
            WriteFile(self.base_dir / relative, content.encode("utf-8"))
        )

    def build(self) -> FileSystemPlan:
        return FileSystemPlan(base_dir=self.base_dir, operations=tuple(self.operations))


class ProjectPlanner:
    """Computes the complete file layout of a new Regolith add-on.

    The layout always contains the behavior pack, the Regolith ``config.json``
    and ``package.json``.  Depending on the answers it adds:
    - a resource pack cross-linked with the behavior pack
    - an entry-point script and the esbuild/terser build filters
    - TypeScript configs
    - a ``filters/`` directory for local Node.js filters
    - ESLint and Prettier configs and ``package.json`` scripts
    """

    def __init__(
        self,
        config: Config | None = None,
        uuid_factory: UuidFactory | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.uuid_factory: UuidFactory = uuid_factory or uuid.uuid4
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def plan(self, answers: Answers) -> FileSystemPlan:
        """Compute the ordered operations that scaffold *answers*' project."""
        builder = _PlanBuilder(PurePosixPath(answers.base_dir_name))
        ids = self._mint_identifiers(answers)

        # 1. Project root and its tooling files
        builder.make_dir()
        builder.write(".gitignore", self.renderer.render("gitignore.j2"))
        builder.write(
            "config.json",
            to_json(
                build_regolith_config(
                    answers,
                    author=self.config.author,
                    schema_url=self.config.schema_url,
                )
            ),
        )
        builder.write(
            "package.json", to_json(build_package_json(answers, self.config.versions))
        )
        self._plan_tooling(builder, answers)

        # 2. Behavior pack
        builder.make_dir("packs")
        builder.make_dir("packs/BP")
        builder.write(
            "packs/BP/manifest.json",
            to_json(
                build_bp_manifest(
                    answers,
                    bp_uuid=ids["bp"],
                    rp_uuid=ids["rp"],
                    data_module_uuid=ids["data"],
                    script_module_uuid=ids.get("script"),
                )
            ),
        )
        if answers.use_scripting:
            builder.make_dir("packs/BP/scripts")
            builder.write(
                f"packs/BP/scripts/{answers.index_script_name}",
                self.renderer.render("index_script.j2"),
            )
        self._plan_texts(builder, "packs/BP", answers)

        # 3. Regolith data directory (left empty)
        builder.make_dir("packs/data")

        # 4. Resource pack
        if answers.include_resource_pack:
            builder.make_dir("packs/RP")
            builder.write(
                "packs/RP/manifest.json",
                to_json(
                    build_rp_manifest(
                        answers,
                        rp_uuid=ids["rp"],
                        bp_uuid=ids["bp"],
                        resources_module_uuid=ids["resources"],
                    )
                ),
            )
            self._plan_texts(builder, "packs/RP", answers)

        # 5. Local Node.js filters
        if answers.use_local_filters:
            self._plan_local_filters(builder, answers)

        return builder.build()

    # -- Identifiers -------------------------------------------------------

    def _mint_identifiers(self, answers: Answers) -> dict[str, str]:
        """One fresh identifier per pack and per module, never shared."""
        ids = {
            "bp": str(self.uuid_factory()),
            "rp": str(self.uuid_factory()),
            "data": str(self.uuid_factory()),
        }
        if answers.use_scripting:
            ids["script"] = str(self.uuid_factory())
        if answers.include_resource_pack:
            ids["resources"] = str(self.uuid_factory())
        return ids

    # -- Tooling -----------------------------------------------------------

    def _plan_tooling(self, builder: _PlanBuilder, answers: Answers) -> None:
        """ESLint, Prettier and TypeScript configs at the project root."""
        if answers.use_eslint:
            builder.write(
                ".eslintrc.cjs",
                self.renderer.render(
                    "eslintrc.cjs.j2", {"config": build_eslint_config(answers)}
                ),
            )
        if answers.include_prettier:
            builder.write(".prettierrc", to_json({}))
        if answers.use_typescript:
            builder.write("tsconfig.json", to_json(build_tsconfig()))

    # -- Texts -------------------------------------------------------------

    def _plan_texts(self, builder: _PlanBuilder, pack_dir: str, answers: Answers) -> None:
        """``texts/`` with the pack name and description for ``en_US``."""
        builder.make_dir(f"{pack_dir}/texts")
        builder.write(
            f"{pack_dir}/texts/en_US.lang",
            self.renderer.render("en_US.lang.j2", {"project_name": answers.project_name}),
        )
        builder.write(
            f"{pack_dir}/texts/languages.json", json.dumps(build_languages_json())
        )

    # -- Local filters -----------------------------------------------------

    def _plan_local_filters(self, builder: _PlanBuilder, answers: Answers) -> None:
        context = {"use_typescript": answers.use_typescript, "tmp_dir": REGOLITH_TMP_DIR}

        builder.make_dir("filters")
        builder.write("filters/package.json", to_json(build_filters_package_json()))
        if answers.use_typescript:
            builder.write("filters/tsconfig.json", to_json(build_filters_tsconfig()))
            builder.write("filters/common.ts", self.renderer.render("common.ts.j2", context))

        builder.make_dir("filters/example_filter")
        builder.write(
            f"filters/example_filter/{answers.index_script_name}",
            self.renderer.render("example_filter.j2", context),
        )


def plan(
    answers: Answers,
    *,
    config: Config | None = None,
    uuid_factory: UuidFactory | None = None,
) -> FileSystemPlan:
    """Shortcut for ``ProjectPlanner(config, uuid_factory).plan(answers)``."""
    return ProjectPlanner(config=config, uuid_factory=uuid_factory).plan(answers)
