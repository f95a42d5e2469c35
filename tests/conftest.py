"""Pytest configuration for the i18ngen test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from i18ngen.storage.config import I18nConfig
from i18ngen.storage.store import ResourceStore

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# WORKSPACE FIXTURES
# =============================================================================


def write_json(path: Path, data: Any) -> None:
    """Write a JSON document, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")


class Workspace:
    """Temporary Flutter-style workspace for file-backed tests."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.store = ResourceStore(root)

    def configure(self, **overrides: Any) -> I18nConfig:
        """Write i18nconfig.json from I18nConfig fields."""
        config = I18nConfig(**overrides)
        write_json(self.root / "i18nconfig.json", config.to_dict())
        return config

    def resource(self, locale: str, data: Any, folder: str = "i18n") -> Path:
        """Write one locale resource."""
        path = self.root / folder / f"{locale}.json"
        write_json(path, data)
        return path

    def read_config(self) -> dict[str, Any]:
        """Read the raw configuration document."""
        return json.loads((self.root / "i18nconfig.json").read_text(encoding="utf-8"))

    def read_resource(self, locale: str, folder: str = "i18n") -> dict[str, Any]:
        """Read one raw locale resource."""
        return json.loads((self.root / folder / f"{locale}.json").read_text(encoding="utf-8"))

    @property
    def output(self) -> Path:
        """Default generated output path."""
        return self.root / "lib" / "generated" / "i18n.dart"


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Empty workspace rooted in a temporary directory."""
    return Workspace(tmp_path)
