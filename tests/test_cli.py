import json
import logging

import pytest

from wcag_contrast.config import settings
from wcag_contrast.main import build_parser, main


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_wcag_cli", False):
            root.removeHandler(h)


def _run(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, json.loads(out)


def test_contrast_command(capsys):
    code, data = _run(capsys, ["contrast", "#fff", "rgb(0,0,0)"])
    assert code == 0
    assert data["ratio"] == 21.0


def test_analyze_command_with_options(capsys):
    code, data = _run(
        capsys, ["analyze", "#767676", "#ffffff", "--content-type", "normal-text", "--level", "AAA"]
    )
    assert code == 0
    assert data["meetsRequirement"] is False
    assert data["requirement"]["minimumRatio"] == 7.0


def test_suggest_command(capsys):
    code, data = _run(capsys, ["suggest", "#7c8aff", "#ffffff", "--target", "4.5", "--preserve", "background"])
    assert code == 0
    assert data["suggestions"][0]["adjustedProperty"] == "foreground"


def test_invalid_color_exits_nonzero(capsys):
    code, data = _run(capsys, ["analyze", "notacolor", "#fff"])
    assert code == 1
    assert "notacolor" in data["error"]


def test_list_tools(capsys):
    code, data = _run(capsys, ["list-tools"])
    assert code == 0
    assert len(data["tools"]) == 3


def test_call_command(capsys):
    code, data = _run(
        capsys,
        ["call", "calculate_contrast_ratio", "--args", '{"foreground": "#000", "background": "#fff"}'],
    )
    assert code == 0
    assert data["ratio"] == 21.0


def test_call_command_bad_json(capsys):
    code, data = _run(capsys, ["call", "calculate_contrast_ratio", "--args", "{not json"])
    assert code == 1
    assert "Invalid JSON" in data["error"]


def test_parser_rejects_unknown_choice():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["analyze", "#000", "#fff", "--level", "A"])


def test_log_level_choices():
    assert build_parser().parse_args(["--log-level", "debug", "list-tools"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "bogus", "list-tools"])


def test_unknown_env_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "BOGUS")
    assert build_parser().parse_args(["list-tools"]).log_level == "WARNING"
