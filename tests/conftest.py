from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and asset projects.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from assetgen.domain.asset_models import AssetRecord  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'assetgen.domain.config'.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        # IO Paths
        "input_path": str(tmp_path),
        "output_path": "",

        # Generation
        "class_name": "StaticAssets",
        "path_base": "/",
        "root_directory": "wwwroot",
        "flatten_extensions": True,
        "flatten_overrides": {},

        # Discovery
        "exclude_patterns": [],

        # Companion check
        "check_hardcoded_paths": False,
    }


@pytest.fixture
def make_records() -> Callable[..., List[AssetRecord]]:
    """Build asset records for '/project/wwwroot/<rel>' paths."""

    def _make(*relative_paths: str, flatten: bool = True) -> List[AssetRecord]:
        return [
            AssetRecord(source_path=f"/project/wwwroot/{rel}", flatten_extensions=flatten)
            for rel in relative_paths
        ]

    return _make


@pytest.fixture
def asset_project(tmp_path: Path) -> Path:
    """
    Create a small web project on disk.

    Structure:
    /project
      /wwwroot
        /css
          site.css
        /images
          logo.png
        favicon.ico
      app.py
    """
    project = tmp_path / "project"
    wwwroot = project / "wwwroot"
    (wwwroot / "css").mkdir(parents=True)
    (wwwroot / "images").mkdir()

    (wwwroot / "css" / "site.css").write_text("body {}", encoding="utf-8")
    (wwwroot / "images" / "logo.png").write_bytes(b"\x89PNG")
    (wwwroot / "favicon.ico").write_bytes(b"\x00")
    (project / "app.py").write_text("print('hello')\n", encoding="utf-8")

    return project


@pytest.fixture
def load_generated() -> Callable[[str], Dict[str, Any]]:
    """Execute generated module source and return its namespace."""

    def _load(source: str) -> Dict[str, Any]:
        namespace: Dict[str, Any] = {"__name__": "generated_assets"}
        exec(compile(source, "<generated>", "exec"), namespace)
        return namespace

    return _load
