"""Tests for CLI entry point.

Verifies that the headless CLI commands work correctly.
"""
from __future__ import annotations

import subprocess
import sys

import pytest


def _run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the CLI with the given arguments."""
    return subprocess.run(
        [sys.executable, "-m", "shock_absorber", *args],
        capture_output=True, text=True, timeout=120,
    )


class TestCLI:
    """Test CLI commands."""

    def test_version(self):
        result = _run_cli("version")
        assert result.returncode == 0
        assert "shock-absorber" in result.stdout
        assert "0.1.0" in result.stdout

    def test_help(self):
        result = _run_cli("help")
        assert result.returncode == 0
        assert "run" in result.stdout
        assert "regimes" in result.stdout
        assert "animate" in result.stdout

    def test_no_args(self):
        result = _run_cli()
        assert result.returncode == 0
        assert "Usage:" in result.stdout

    def test_unknown_command(self):
        result = _run_cli("nonexistent")
        assert result.returncode == 1
        assert "Unknown command" in result.stdout

    def test_regimes(self):
        result = _run_cli("regimes")
        assert result.returncode == 0
        assert "Underdamped" in result.stdout
        assert "Critically Damped" in result.stdout
        assert "8.9443" in result.stdout  # 2*sqrt(20)

    @pytest.mark.parametrize("regime", ["underdamped", "critically_damped", "overdamped"])
    def test_run(self, regime):
        result = _run_cli("run", regime, "500")
        assert result.returncode == 0
        assert f"Regime: {regime}" in result.stdout
        assert "[PASS]" in result.stdout
        assert "[FAIL]" not in result.stdout

    def test_run_bad_regime(self):
        result = _run_cli("run", "bouncy")
        assert result.returncode == 1
        assert "Error" in result.stdout

    def test_run_bad_step_count(self):
        result = _run_cli("run", "underdamped", "many")
        assert result.returncode == 1

    def test_stability(self):
        result = _run_cli("stability")
        assert result.returncode == 0
        assert "overdamped" in result.stdout
        assert "UNSTABLE" not in result.stdout

    def test_plot(self, tmp_output_dir):
        output = tmp_output_dir / "regimes.png"
        result = _run_cli("plot", str(output))
        assert result.returncode == 0
        assert output.exists()
