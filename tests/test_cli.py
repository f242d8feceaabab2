"""
tests/test_cli.py — CLI tests.

Tests commands using Click CliRunner.
"""

import os
import sys
import yaml
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from click.testing import CliRunner

from bstack.cli import main


@pytest.fixture(autouse=True)
def clean(tmp_path, monkeypatch):
    monkeypatch.setattr("bstack.config.BSTACK_HOME", tmp_path / "home")
    monkeypatch.delenv("BSTACK_CAPACITY", raising=False)
    yield


runner = CliRunner()


SCENARIO = {
    "apiVersion": "bstack.io/v1",
    "kind": "Scenario",
    "metadata": {"name": "gifts"},
    "capacity": 3,
    "steps": [
        {"push": "a"},
        {"push": "b"},
        {"push": "c"},
        {"push": "d", "expect": False},
        {"peek": 1, "expect": "b"},
        "pop",
        "is_full",
        "is_homogeneous",
    ],
}


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text(yaml.dump(SCENARIO))
    return str(path)


class TestRun:
    def test_run_scenario(self, scenario_file):
        result = runner.invoke(main, ["run", "-f", scenario_file])
        assert result.exit_code == 0
        assert "Scenario: gifts (capacity 3)" in result.output
        assert "[3] push 'd' -> false  ✓" in result.output
        assert "[4] peek 1 -> 'b'  ✓" in result.output
        assert "[5] pop -> 'c'" in result.output
        assert "8 steps, 2 checked, 0 failed" in result.output

    def test_run_capacity_override_fails_expectation(self, scenario_file):
        result = runner.invoke(main, [
            "run", "-f", scenario_file, "--capacity", "4",
        ])
        assert result.exit_code == 1
        assert "[3] push 'd' -> true  ✗ expected false" in result.output
        assert "[4] peek 1 -> 'c'  ✗ expected 'b'" in result.output
        assert "2 checked, 2 failed" in result.output

    def test_run_with_overlay(self, scenario_file, tmp_path):
        overlay = tmp_path / "overlay.yaml"
        overlay.write_text(yaml.dump({
            "extra_steps": ["pop", "pop", {"pop": None, "expect": None}],
        }))
        result = runner.invoke(main, [
            "run", "-f", scenario_file, "-f", str(overlay),
        ])
        assert result.exit_code == 0
        assert "11 steps, 3 checked, 0 failed" in result.output

    def test_run_to_file(self, scenario_file, tmp_path):
        out = tmp_path / "report.txt"
        result = runner.invoke(main, [
            "run", "-f", scenario_file, "-o", str(out),
        ])
        assert result.exit_code == 0
        assert "Scenario: gifts" in out.read_text()

    def test_run_verbose(self, scenario_file):
        result = runner.invoke(main, ["run", "-f", scenario_file, "-v"])
        assert result.exit_code == 0
        assert "count=3/3" in result.output

    def test_run_missing_file(self):
        result = runner.invoke(main, ["run", "-f", "/nonexistent.yaml"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_run_bad_overlay_metadata(self, scenario_file, tmp_path):
        overlay = tmp_path / "overlay.yaml"
        overlay.write_text("metadata: tight\n")
        result = runner.invoke(main, [
            "run", "-f", scenario_file, "-f", str(overlay),
        ])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error: Overlay error: overlay metadata must be a mapping" in result.output

    def test_run_empty_pop_report(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text(
            "metadata: {name: x}\n"
            "capacity: 1\n"
            "steps:\n"
            "  - push: false\n"
            "  - pop: null\n"
            "    expect: false\n"
            "  - pop: null\n"
            "    expect: null\n"
        )
        result = runner.invoke(main, ["run", "-f", str(path)])
        assert result.exit_code == 0
        assert "[1] pop -> 'false'  ✓" in result.output
        assert "[2] pop -> none  ✓" in result.output

    def test_run_invalid_scenario(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text(yaml.dump({"metadata": {"name": "x"}, "steps": ["jump"]}))
        result = runner.invoke(main, ["run", "-f", str(bad)])
        assert result.exit_code == 1
        assert "unknown op" in result.output

    def test_run_uses_config_capacity(self, tmp_path):
        runner.invoke(main, ["config", "set-capacity", "1"])
        path = tmp_path / "s.yaml"
        path.write_text(yaml.dump({
            "metadata": {"name": "x"},
            "steps": ["is_empty", {"push": "a"}, "is_full"],
        }))
        result = runner.invoke(main, ["run", "-f", str(path)])
        assert result.exit_code == 0
        assert "(capacity 1)" in result.output
        assert "[2] is_full -> true" in result.output


class TestInspect:
    def test_inspect(self, scenario_file):
        result = runner.invoke(main, ["inspect", "-f", scenario_file])
        assert result.exit_code == 0
        assert "gifts" in result.output
        assert "Steps:     8" in result.output
        assert "push 'd'  (expect False)" in result.output

    def test_inspect_invalid(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text(yaml.dump({"kind": "Queue"}))
        result = runner.invoke(main, ["inspect", "-f", str(bad)])
        assert result.exit_code == 1

    def test_inspect_bad_overlay_metadata(self, scenario_file, tmp_path):
        overlay = tmp_path / "overlay.yaml"
        overlay.write_text("metadata: null\n")
        result = runner.invoke(main, [
            "inspect", "-f", scenario_file, "-f", str(overlay),
        ])
        assert result.exit_code == 1
        assert "Error: overlay metadata must be a mapping" in result.output


class TestConfig:
    def test_show_default(self):
        result = runner.invoke(main, ["config", "show"])
        assert result.exit_code == 0
        assert "default_capacity:  16" in result.output

    def test_set_capacity(self):
        result = runner.invoke(main, ["config", "set-capacity", "5"])
        assert result.exit_code == 0
        result = runner.invoke(main, ["config", "show"])
        assert "default_capacity:  5" in result.output

    def test_show_env_override(self, monkeypatch):
        monkeypatch.setenv("BSTACK_CAPACITY", "9")
        result = runner.invoke(main, ["config", "show"])
        assert "Effective:         9" in result.output
