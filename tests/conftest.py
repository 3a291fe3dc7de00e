"""Shared pytest configuration and fixtures for tests."""

import io
import sys
from pathlib import Path

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from jotter.tui.session import TerminalSession


@pytest.fixture
def screen():
    """Plain-text console standing in for the terminal."""
    return Console(file=io.StringIO(), width=80, height=20)


@pytest.fixture
def pipe_input():
    """Pipe-backed prompt_toolkit input; send_text() feeds key presses."""
    with create_pipe_input() as pipe:
        yield pipe


@pytest.fixture
def session(screen, pipe_input):
    """Headless terminal session driven by pipe_input."""
    return TerminalSession(console=screen, input=pipe_input, output=DummyOutput())
