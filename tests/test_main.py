import json

import pytest

import main
from RPNCalc import config_manager


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_manager.DEFAULT_SETTINGS), encoding="utf-8")
    monkeypatch.setattr(config_manager, "config_json", path)


def test_cli_prints_result(capsys):
    assert main.main(["(15", "+", "7)", "/", "2"]) == 0
    assert capsys.readouterr().out.strip() == "11"


def test_cli_reports_errors(capsys):
    assert main.main(["11 + 13) * 2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error 3102:" in captured.err


def test_required_files_exist():
    # exits with status 1 if anything is missing
    main.check_files_exist()
