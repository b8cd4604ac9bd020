from __future__ import annotations

"""
Integration tests for the generation pipeline (run_pipeline).

Exercises discovery, generation, the hardcoded path check and the
write-if-changed deployment against real project directories.
"""

import os
from pathlib import Path
from typing import Any, Dict

from assetgen.core.pipeline.engine import run_pipeline


def _config(project: Path, **extra: Any) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {"input_path": str(project)}
    cfg.update(extra)
    return cfg


def test_pipeline_writes_module(asset_project: Path, load_generated) -> None:
    result = run_pipeline(_config(asset_project))

    assert result.ok is True
    assert result.written is True
    assert result.asset_count == 3
    assert result.output_path == str(asset_project / "static_assets.py")

    source = (asset_project / "static_assets.py").read_text(encoding="utf-8")
    assets = load_generated(source)["StaticAssets"]
    assert assets.Images.LogoPng == "/images/logo.png"
    assert assets.Css.SiteCss == "/css/site.css"
    assert assets.FaviconIco == "/favicon.ico"


def test_second_run_is_a_no_op(asset_project: Path) -> None:
    first = run_pipeline(_config(asset_project))
    target = asset_project / "static_assets.py"
    os.utime(target, (1_000_000, 1_000_000))

    second = run_pipeline(_config(asset_project))

    assert first.written is True
    assert second.ok is True
    assert second.written is False
    assert os.path.getmtime(target) == 1_000_000


def test_dry_run_does_not_write(asset_project: Path) -> None:
    result = run_pipeline(_config(asset_project), dry_run=True)

    assert result.ok is True
    assert result.dry_run is True
    assert result.written is False
    assert "class StaticAssets" in result.source
    assert not (asset_project / "static_assets.py").exists()


def test_custom_output_and_options(asset_project: Path, load_generated) -> None:
    result = run_pipeline(
        _config(
            asset_project,
            output_path="generated/web_assets.py",
            class_name="WebAssets",
            path_base="/admin/v3/",
            flatten_extensions=False,
        )
    )

    target = asset_project / "generated" / "web_assets.py"
    assert result.output_path == str(target)

    assets = load_generated(target.read_text(encoding="utf-8"))["WebAssets"]
    assert assets.Images.Logo == "/admin/v3/images/logo.png"


def test_no_asset_root_generates_nothing(tmp_path: Path) -> None:
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "logo.png").write_bytes(b"")

    result = run_pipeline(_config(tmp_path))

    assert result.ok is True
    assert result.asset_count == 0
    assert result.output_path == ""
    assert list(tmp_path.iterdir()) == [tmp_path / "public"]


def test_collisions_fail_without_touching_existing_output(tmp_path: Path) -> None:
    images = tmp_path / "wwwroot" / "images"
    images.mkdir(parents=True)
    (images / "logo-1.png").write_bytes(b"")
    (images / "logo_1.png").write_bytes(b"")
    previous = tmp_path / "static_assets.py"
    previous.write_text("# previous\n", encoding="utf-8")

    result = run_pipeline(_config(tmp_path))

    assert result.ok is False
    assert "Images.Logo1Png" in result.error
    assert result.error_count == 2
    assert result.summary["duplicate_keys"] == ["Images.Logo1Png"]
    assert previous.read_text(encoding="utf-8") == "# previous\n"


def test_invalid_input_directory(tmp_path: Path) -> None:
    result = run_pipeline(_config(tmp_path / "missing"))

    assert result.ok is False
    assert "Invalid input directory" in result.error


def test_hardcoded_path_check(asset_project: Path) -> None:
    (asset_project / "views.py").write_text(
        'LOGO = "/images/logo.png"\n', encoding="utf-8"
    )

    result = run_pipeline(_config(asset_project, check_hardcoded_paths=True))

    assert result.ok is True
    assert result.summary["checked_files"] == 2
    assert result.warning_count == 1
    assert result.diagnostics[0].path == str(asset_project / "views.py")


def test_check_ignores_generated_module(asset_project: Path) -> None:
    run_pipeline(_config(asset_project))

    result = run_pipeline(_config(asset_project, check_hardcoded_paths=True))

    assert result.summary["checked_files"] == 1
    assert result.warning_count == 0


def test_summary_reports_unicode_version(asset_project: Path) -> None:
    result = run_pipeline(_config(asset_project), dry_run=True)

    assert result.summary["assets"] == 3
    assert result.summary["unicode_version"]
