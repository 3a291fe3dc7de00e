"""
Test the command line entry point.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent


def run_cli(*args, **kwargs):
    """Run the CLI in a subprocess with no terminal attached."""
    return subprocess.run(
        [sys.executable, "-m", "jotter.cli.main", *args],
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        cwd=project_root,
        **kwargs,
    )


def test_version_command():
    """'jotter version' prints the version."""
    result = run_cli("version")

    assert "Jotter v" in result.stdout, f"Expected version output, got: {result.stdout}"
    assert result.returncode == 0

    print("✓ Version command works")


def test_help_command():
    """'jotter help' lists the key bindings."""
    result = run_cli("help")

    assert result.returncode == 0
    assert "Keys:" in result.stdout
    assert "Backspace" in result.stdout


def test_default_without_terminal_fails():
    """Opening the editor with no terminal exits with status 1."""
    result = run_cli()

    assert result.returncode == 1, f"Expected exit code 1, got: {result.returncode}"
    assert "not a terminal" in result.stderr, f"Expected error on stderr, got: {result.stderr}"
    assert result.stdout == ""

    print("✓ Missing terminal is reported as a startup error")


def test_log_file_option(tmp_path):
    """--log-file writes debug logs to the given file."""
    log_file = tmp_path / "jotter.log"

    result = run_cli("--log-file", str(log_file), "version")

    assert result.returncode == 0
    assert log_file.exists()
    assert "logging to" in log_file.read_text(encoding="utf-8")
