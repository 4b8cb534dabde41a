from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from xlsx_rels.cli import EXIT_INPUT_ERROR, EXIT_OK, main
from xlsx_rels.config import LOG_LEVEL_ENV, RelsConfig

WORKBOOK_RELS = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
  <Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet" Target="worksheets/sheet1.xml"/>
  <Relationship Id="rId2" Type="http://customschemas.contoso.com/foo" Target="../media/image1.png"/>
</Relationships>
"""


def _write_rels(base: Path) -> Path:
    rels_path = base / "xl" / "_rels" / "workbook.xml.rels"
    rels_path.parent.mkdir(parents=True)
    rels_path.write_text(WORKBOOK_RELS, encoding="utf-8")
    return rels_path


def test_config_derives_root_from_rels_path():
    config = RelsConfig(rels_path="xl/_rels/workbook.xml.rels", csv_path="out/rels.csv")
    assert config.root == "xl"
    assert config.rels_path == Path("xl/_rels/workbook.xml.rels")
    assert config.csv_path == Path("out/rels.csv")


def test_config_loose_file_uses_parent_dir():
    assert RelsConfig(rels_path="workbook.xml.rels").root == ""
    assert RelsConfig(rels_path="dump/workbook.xml").root == "dump"


def test_config_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert RelsConfig(rels_path="_rels/.rels").log_level == "DEBUG"


def test_main_prints_summary_and_writes_csv(tmp_path: Path, capsys):
    rels_path = _write_rels(tmp_path)
    csv_path = tmp_path / "out" / "rels.csv"

    code = main([str(rels_path), "--root", "xl", "--csv", str(csv_path)])
    assert code == EXIT_OK

    out = capsys.readouterr().out
    assert "rId1\tworksheet\txl/worksheets/sheet1.xml [sheet]" in out
    assert "rId2\thttp://customschemas.contoso.com/foo\txl/../media/image1.png [unknown]" in out
    assert "2 relationships: 1 known, 1 unknown" in out

    df = pd.read_csv(csv_path)
    assert df["id"].tolist() == ["rId1", "rId2"]
    assert df["type"].tolist() == ["worksheet", "http://customschemas.contoso.com/foo"]


def test_main_missing_file(tmp_path: Path):
    assert main([str(tmp_path / "nope.rels")]) == EXIT_INPUT_ERROR


def test_main_malformed_file(tmp_path: Path):
    bad = tmp_path / "_rels" / ".rels"
    bad.parent.mkdir()
    bad.write_text("<Relationships", encoding="utf-8")
    assert main([str(bad)]) == EXIT_INPUT_ERROR


def test_main_directory_path(tmp_path: Path):
    assert main([str(tmp_path)]) == EXIT_INPUT_ERROR


def test_main_rejects_unknown_log_level(tmp_path: Path):
    rels_path = _write_rels(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main([str(rels_path), "--log-level", "loud"])
    assert excinfo.value.code == 2


def test_main_accepts_lowercase_log_level(tmp_path: Path):
    rels_path = _write_rels(tmp_path)
    assert main([str(rels_path), "--log-level", "warning"]) == EXIT_OK


def test_main_rejects_unknown_log_level_from_env(tmp_path: Path, monkeypatch):
    rels_path = _write_rels(tmp_path)
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
    with pytest.raises(SystemExit) as excinfo:
        main([str(rels_path)])
    assert excinfo.value.code == 2


def test_config_rejects_unknown_log_level():
    with pytest.raises(ValueError, match="LOUD"):
        RelsConfig(rels_path="_rels/.rels", log_level="loud")
