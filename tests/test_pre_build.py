from __future__ import annotations

import json
from pathlib import Path

import pre_build
from pre_build import PreBuild, main


def test_pre_build_creates_data_dir_on_construction(tmp_path: Path, capsys) -> None:
    data = tmp_path / "site" / "data"

    PreBuild(tmp_path / "config", data)

    assert data.is_dir()
    assert f"[INFO] Creating Data Directory: {data}" in capsys.readouterr().out


def test_pre_build_process_converts_config_tree(tmp_path: Path, capsys) -> None:
    config = tmp_path / "config"
    (config / "portfolio").mkdir(parents=True)
    (config / "global.yml").write_text("siteName: Docs\n", encoding="utf-8")
    (config / "portfolio" / "projects.yaml").write_text("- name: atlas\n", encoding="utf-8")

    report = PreBuild(config, tmp_path / "data").process()

    assert report is not None and report.processed_count == 2
    assert json.loads((tmp_path / "data" / "portfolio" / "projects.json").read_text()) == [{"name": "atlas"}]
    out = capsys.readouterr().out
    assert "[INFO] Starting Build Process..." in out
    assert "[INFO] Build Process Completed Successfully" in out


def test_pre_build_missing_config_dir_still_completes(tmp_path: Path, capsys) -> None:
    report = PreBuild(tmp_path / "missing", tmp_path / "data").process()

    assert report is not None and report.processed_count == 0
    captured = capsys.readouterr()
    assert "[WARN] Config Directory Not Found:" in captured.err
    assert "Build Process Completed Successfully" in captured.out


def test_pre_build_swallows_unexpected_errors(tmp_path: Path, monkeypatch, capsys) -> None:
    def boom(source, dest):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(pre_build, "convert", boom)

    assert PreBuild(tmp_path / "config", tmp_path / "data").process() is None
    err = capsys.readouterr().err
    assert "[ERROR] Build Process Failed: disk on fire" in err
    assert "[WARN] Continuing with Build Despite Pre-Build Errors" in err


def test_pre_build_setup_failure_is_logged(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")

    PreBuild(tmp_path / "config", blocker / "nested")

    assert "[ERROR] Failed to Setup Configuration:" in capsys.readouterr().err


def test_main_exit_status(tmp_path: Path) -> None:
    config = tmp_path / "config"
    config.mkdir()
    (config / "bad.yml").write_text("x: [oops\n", encoding="utf-8")
    args = ["--config-dir", str(config), "--data-dir", str(tmp_path / "data")]

    assert main(args) == 0
    assert main(args + ["--strict"]) == 1
