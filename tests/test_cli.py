"""
Tests for CLI: analyze command, output formats, config flag, error cases.
"""

import json
import subprocess
import sys
import tempfile
from pathlib import Path

from flowscope.cli import main

GOLDEN_DIR = Path(__file__).resolve().parent / "fixtures" / "golden"


def _run_cli(args: list[str]) -> tuple[int, str, str]:
    """Run `python -m flowscope.cli` and return (exit_code, stdout, stderr)."""
    cmd = [sys.executable, "-m", "flowscope.cli"] + args
    result = subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")
    return result.returncode, result.stdout, result.stderr


def test_cli_analyze_basic():
    exit_code, stdout, stderr = _run_cli(["analyze", str(GOLDEN_DIR / "switch_branch.json")])
    assert exit_code == 0
    data = json.loads(stdout)
    assert data["summary"]["total_components"] == 1
    metrics = data["components"][0]["metrics"]
    assert metrics["cyclomatic-complexity"]["value"] == 3
    assert "Analysis complete: 1 components found" in stderr


def test_cli_pretty_output(capsys):
    exit_code = main(["analyze", str(GOLDEN_DIR / "linear.json"), "--pretty"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("{\n  ")
    assert json.loads(out)["components"][0]["id"] == "tab1-component-0"


def test_cli_text_format(capsys):
    exit_code = main(["analyze", str(GOLDEN_DIR / "disconnected.json"), "--format", "text"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Components: 3" in out


def test_cli_output_file(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        output = Path(tmp) / "report.json"
        exit_code = main(
            ["analyze", str(GOLDEN_DIR / "linear.json"), "--output", str(output)]
        )
        assert exit_code == 0
        assert capsys.readouterr().out == ""
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["summary"]["flow_count"] == 1


def test_cli_config_flag(capsys):
    flow = [
        {"id": "t", "type": "tab", "label": "T"},
        {"id": "r", "type": "router", "z": "t", "wires": [["a"], ["b"]]},
        {"id": "a", "type": "debug", "z": "t", "wires": []},
        {"id": "b", "type": "debug", "z": "t", "wires": []},
    ]
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "flow.json").write_text(json.dumps(flow))
        (root / "config.yaml").write_text("extra_decision_types: [router]\n")
        exit_code = main(
            ["analyze", str(root / "flow.json"), "--config", str(root / "config.yaml")]
        )
    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["components"][0]["metrics"]["cyclomatic-complexity"]["value"] == 2


def test_cli_missing_file(capsys):
    exit_code = main(["analyze", "/nonexistent/flow.json"])
    assert exit_code == 1
    assert "does not exist" in capsys.readouterr().err


def test_cli_invalid_export(capsys):
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bad.json"
        path.write_text('{"id": "x"}')
        exit_code = main(["analyze", str(path)])
    assert exit_code == 1
    assert "Error: Flow export must be an array" in capsys.readouterr().err


def test_cli_missing_config(capsys):
    exit_code = main(
        ["analyze", str(GOLDEN_DIR / "linear.json"), "--config", "/nonexistent/c.yaml"]
    )
    assert exit_code == 1
    assert "Config file not found" in capsys.readouterr().err


def test_cli_no_command(capsys):
    assert main([]) == 1
