"""Builders for the JSON documents of a generated add-on.

Each builder takes the validated :class:`Answers` (plus whatever identifiers or
configuration it needs) and returns a complete, freshly-built document.  No
builder mutates a document after it has been returned, so each one can be
tested in isolation against a single set of answers.
"""

from __future__ import annotations

import json
from typing import Any

from ..config import PackageVersions
from .answers import Answers

PACK_VERSION: list[int] = [1, 0, 0]
BUNDLE_ENTRY = "scripts/__bundle.js"

# Modules provided by the game at runtime; never bundled.
EXTERNAL_MODULES: tuple[str, ...] = (
    "@minecraft/common",
    "@minecraft/debug-utilities",
    "@minecraft/server",
    "@minecraft/server-*",
)

BUILD_SCRIPTS_FILTER = "build_scripts"
PROD_FINISH_FILTER = "prod_finish_up_build_scripts"
EXAMPLE_FILTER = "example_filter"


def to_json(document: Any) -> str:
    """Serialise *document* with 4-space indentation and no trailing newline."""
    return json.dumps(document, indent=4, ensure_ascii=False)


# ---------------------------------------------------------------------------
# config.json
# ---------------------------------------------------------------------------


def build_filter_definitions(answers: Answers) -> dict[str, Any]:
    """Filter definitions for the Regolith config; empty without scripting."""
    if not answers.use_scripting:
        return {}

    externals = " ".join(f"--external:{m}" for m in EXTERNAL_MODULES)
    definitions: dict[str, Any] = {
        BUILD_SCRIPTS_FILTER: {
            "runWith": "shell",
            "command": (
                f"npx esbuild BP/scripts/{answers.index_script_name} "
                f"--outfile=BP/{BUNDLE_ENTRY} --bundle --format=esm {externals}"
            ),
        },
        PROD_FINISH_FILTER: {
            "runWith": "shell",
            "command": (
                f"npx terser BP/{BUNDLE_ENTRY} --module -cmo BP/{BUNDLE_ENTRY}; "
                "Remove-Item BP/scripts/* -Recurse -Exclude __bundle.js"
            ),
        },
    }
    if answers.use_local_filters:
        definitions[EXAMPLE_FILTER] = build_example_filter_definition(answers)
    return definitions


def build_example_filter_definition(answers: Answers) -> dict[str, str]:
    if answers.use_typescript:
        return {"runWith": "shell", "command": f"npm run tsx filters/{EXAMPLE_FILTER}"}
    return {"runWith": "nodejs", "script": f"filters/{EXAMPLE_FILTER}/index.js"}


def build_profiles(answers: Answers) -> dict[str, Any]:
    """The ``default`` and ``prod`` profiles.

    ``prod`` runs the ``default`` profile first and then minifies, so it never
    repeats the default filters.
    """
    default_filters: list[dict[str, str]] = []
    prod_filters: list[dict[str, str]] = []
    if answers.use_scripting:
        default_filters = [{"filter": BUILD_SCRIPTS_FILTER}]
        prod_filters = [{"profile": "default"}, {"filter": PROD_FINISH_FILTER}]

    return {
        "default": {
            "export": {
                "target": "preview" if answers.is_targeting_preview else "development",
            },
            "filters": default_filters,
        },
        "prod": {
            "export": {"target": "local"},
            "filters": prod_filters,
        },
    }


def build_regolith_config(
    answers: Answers, *, author: str, schema_url: str
) -> dict[str, Any]:
    packs: dict[str, str] = {"behaviorPack": "./packs/BP"}
    if answers.include_resource_pack:
        packs["resourcePack"] = "./packs/RP"

    return {
        "$schema": schema_url,
        "author": author,
        "name": answers.base_dir_name,
        "packs": packs,
        "regolith": {
            "dataPath": "./packs/data",
            "filterDefinitions": build_filter_definitions(answers),
            "profiles": build_profiles(answers),
        },
    }


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


def build_check_command(answers: Answers) -> str | None:
    """Lint and type-check commands chained with ``&&``, or ``None``."""
    commands: list[str] = []
    if answers.use_eslint:
        commands.append("eslint .")
    if answers.use_typescript:
        commands.append("tsc")
        if answers.use_local_filters:
            commands.append("tsc -p filters")
    return " && ".join(commands) if commands else None


def build_package_scripts(answers: Answers) -> dict[str, str]:
    scripts: dict[str, str] = {}
    if answers.include_prettier:
        scripts["fmt"] = "prettier . -w"

    check = build_check_command(answers)
    if check is not None:
        scripts["check"] = check
        if answers.include_prettier:
            scripts["fmt-check"] = "npm run fmt && npm run check"

    if answers.use_typescript and answers.use_local_filters:
        scripts["tsx"] = "tsx"
    return scripts


def build_dev_dependencies(answers: Answers, versions: PackageVersions) -> dict[str, str]:
    deps: dict[str, str] = {}
    if answers.use_scripting:
        deps["esbuild"] = versions.esbuild
        deps["terser"] = versions.terser
    if answers.use_typescript:
        deps["typescript"] = versions.typescript
    if answers.use_eslint:
        deps["eslint"] = versions.eslint
        if answers.use_typescript:
            deps["@typescript-eslint/eslint-plugin"] = versions.typescript_eslint
            deps["@typescript-eslint/parser"] = versions.typescript_eslint
    if answers.include_prettier:
        deps["prettier"] = versions.prettier
    if answers.use_typescript and answers.use_local_filters:
        deps["tsx"] = versions.tsx
    return deps


def build_package_json(answers: Answers, versions: PackageVersions) -> dict[str, Any]:
    return {
        "private": True,
        "type": "module",
        "scripts": build_package_scripts(answers),
        "devDependencies": build_dev_dependencies(answers, versions),
    }


def build_filters_package_json() -> dict[str, Any]:
    return {"private": True, "type": "module"}


# ---------------------------------------------------------------------------
# Tooling configs
# ---------------------------------------------------------------------------


def build_tsconfig() -> dict[str, Any]:
    return {
        "include": ["./packs/BP/scripts"],
        "compilerOptions": {
            "paths": {"@/*": ["./packs/*"]},
            "forceConsistentCasingInFileNames": True,
            "strict": True,
            "target": "es2022",
            "module": "es2022",
            "moduleResolution": "bundler",
            "noEmit": True,
            "skipLibCheck": True,
        },
    }


def build_filters_tsconfig() -> dict[str, Any]:
    return {"extends": "../tsconfig.json", "include": ["."]}


def build_tsconfig_paths(answers: Answers) -> list[str]:
    paths = ["./tsconfig.json"]
    if answers.use_local_filters:
        paths.append("./filters/tsconfig.json")
    return paths


def build_eslint_config(answers: Answers) -> dict[str, Any]:
    """ESLint config; TypeScript files get a type-aware override."""
    overrides: list[dict[str, Any]] = [
        {
            "files": ["*.cjs"],
            "env": {"node": True},
            "parserOptions": {"sourceType": "script"},
        },
    ]
    if answers.use_typescript:
        overrides.append(
            {
                "files": ["*.ts"],
                "extends": [
                    "plugin:@typescript-eslint/strict-type-checked",
                    "plugin:@typescript-eslint/stylistic-type-checked",
                ],
                "parser": "@typescript-eslint/parser",
                "parserOptions": {"project": build_tsconfig_paths(answers)},
                "plugins": ["@typescript-eslint"],
                "rules": {},
            }
        )

    return {
        "env": {"browser": True, "es2021": True},
        "extends": ["eslint:recommended"],
        "parserOptions": {"ecmaVersion": "latest", "sourceType": "module"},
        "overrides": overrides,
    }


# ---------------------------------------------------------------------------
# Pack manifests
# ---------------------------------------------------------------------------


def _manifest_header(answers: Answers, pack_uuid: str) -> dict[str, Any]:
    return {
        "name": "pack.name",
        "description": "pack.description",
        "min_engine_version": answers.min_engine_version,
        "uuid": pack_uuid,
        "version": list(PACK_VERSION),
    }


def _dependency(pack_uuid: str) -> dict[str, Any]:
    return {"uuid": pack_uuid, "version": list(PACK_VERSION)}


def build_bp_manifest(
    answers: Answers,
    *,
    bp_uuid: str,
    rp_uuid: str,
    data_module_uuid: str,
    script_module_uuid: str | None,
) -> dict[str, Any]:
    """Behavior pack manifest.

    ``script_module_uuid`` is required when scripting is enabled and ignored
    otherwise.
    """
    modules: list[dict[str, Any]] = [
        {"type": "data", "uuid": data_module_uuid, "version": list(PACK_VERSION)},
    ]
    if answers.use_scripting:
        modules.append(
            {
                "type": "script",
                "language": "javascript",
                "uuid": script_module_uuid,
                "entry": BUNDLE_ENTRY,
                "version": list(PACK_VERSION),
            }
        )

    return {
        "format_version": 2,
        "header": _manifest_header(answers, bp_uuid),
        "modules": modules,
        "dependencies": [_dependency(rp_uuid)] if answers.include_resource_pack else [],
    }


def build_rp_manifest(
    answers: Answers,
    *,
    rp_uuid: str,
    bp_uuid: str,
    resources_module_uuid: str,
) -> dict[str, Any]:
    return {
        "format_version": 2,
        "header": _manifest_header(answers, rp_uuid),
        "modules": [
            {
                "type": "resources",
                "uuid": resources_module_uuid,
                "version": list(PACK_VERSION),
            },
        ],
        "dependencies": [_dependency(bp_uuid)],
    }


def build_languages_json() -> list[str]:
    return ["en_US"]
