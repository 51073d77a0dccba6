"""create-regolith-addon configuration.

Typed configuration for the generator.  All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

REGOLITH_SCHEMA_URL = (
    "https://raw.githubusercontent.com/Bedrock-OSS/regolith-schemas/main/config/v1.2.json"
)


class PackageVersions(BaseModel):
    """Version ranges written to the generated ``package.json``.

    The values are opaque to the generator; they are copied verbatim.
    """

    esbuild: str = Field(default="^0.20.2")
    terser: str = Field(default="^5.30.3")
    eslint: str = Field(default="^8.57.0")
    typescript_eslint: str = Field(
        default="^7.3.1",
        description="Shared by @typescript-eslint/eslint-plugin and @typescript-eslint/parser",
    )
    prettier: str = Field(default="^3.2.5")
    tsx: str = Field(default="^4.7.2")
    typescript: str = Field(default="^5.4.3")


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point and handed to the planner (for the
    document constants) and to the executor (for the output location and
    dry-run flag).
    """

    output_dir: Path = Field(default=Path("."))
    dry_run: bool = Field(default=False)
    author: str = Field(default="Your name", description="Written to config.json")
    schema_url: str = Field(default=REGOLITH_SCHEMA_URL)
    versions: PackageVersions = Field(default_factory=PackageVersions)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from a JSON file (the ``--config`` option).

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            REGOLITH_ADDON_OUTPUT_DIR, REGOLITH_ADDON_AUTHOR,
            REGOLITH_ADDON_DRY_RUN (``1``/``true``/``yes`` enable it).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("REGOLITH_ADDON_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["REGOLITH_ADDON_OUTPUT_DIR"])
        if os.environ.get("REGOLITH_ADDON_AUTHOR"):
            kwargs["author"] = os.environ["REGOLITH_ADDON_AUTHOR"]
        dry = os.environ.get("REGOLITH_ADDON_DRY_RUN", "").strip().lower()
        if dry:
            kwargs["dry_run"] = dry in ("1", "true", "yes")
        return cls(**kwargs)
