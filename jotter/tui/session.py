"""
FILE: jotter/tui/session.py
PURPOSE: Own the terminal for the lifetime of the editor
EXPORTS:
  - TerminalSession (context manager)
DEPENDENCIES:
  - prompt_toolkit (raw mode, VT100 key parsing, mouse mode)
  - rich (alternate screen, cursor, full-screen drawing)
  - select, signal (stdlib, blocking wait for input or resize)
  - jotter.core.exceptions (session errors)
NOTES:
  - Startup: raw mode -> alternate screen + hidden cursor -> mouse off
  - Every startup step registers its undo on an ExitStack, so teardown
    is symmetric on every exit path, including a half-finished startup
  - read_key() blocks with no timeout until a key arrives or the terminal
    is resized; SIGWINCH wakes the wait through a self-pipe and comes back
    as a Keys.Ignore press so the loop redraws at the new size
  - A lone Escape is flushed straight away instead of waiting for the
    rest of a possible escape sequence
  - input/output/console can be injected (pipe input for tests)
"""

import logging
import os
import select
import signal
import sys
import threading
from collections import deque
from contextlib import ExitStack
from typing import Deque, Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import Output, create_output
from rich.console import Console, RenderableType

from ..core.exceptions import EventReadError, SessionSetupError, SessionTeardownError

logger = logging.getLogger(__name__)

# Returned by read_key() when the terminal was resized
RESIZE_EVENT = KeyPress(Keys.Ignore)


class TerminalSession:
    """
    Interactive terminal session: raw input plus a full-screen display.

    Usage:
        with TerminalSession() as session:
            session.draw(renderable)
            key_press = session.read_key()

    Args:
        console: Rich console to draw on (defaults to a new stdout console)
        input: prompt_toolkit Input; when omitted, stdin is used and must
            be a terminal
        output: prompt_toolkit Output used for terminal modes (defaults to
            one bound to stdout)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.console = console or Console()
        self._input = input
        self._output = output
        self._stack: Optional[ExitStack] = None
        self._pending: Deque[KeyPress] = deque()
        self._resize_fd: Optional[int] = None

    # --- Lifecycle ---

    def __enter__(self) -> "TerminalSession":
        stack = ExitStack()
        step = "open the terminal"
        try:
            if self._input is None:
                if not (sys.stdin.isatty() and sys.stdout.isatty()):
                    raise SessionSetupError(step, "stdin/stdout is not a terminal")
                self._input = create_input()
            if self._output is None:
                self._output = create_output(stdout=sys.stdout)

            step = "enable raw mode"
            stack.enter_context(self._input.raw_mode())

            step = "switch to the alternate screen"
            stack.enter_context(self.console.screen(hide_cursor=True))

            step = "disable mouse capture"
            self._set_mouse_off()
            stack.callback(self._set_mouse_off)

            step = "watch for terminal resize"
            self._watch_resize(stack)
        except SessionSetupError:
            self._unwind(stack)
            raise
        except Exception as e:
            self._unwind(stack)
            raise SessionSetupError(step, str(e)) from e

        self._stack = stack
        logger.info("terminal session started")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        stack, self._stack = self._stack, None
        if stack is None:
            return
        try:
            stack.close()
        except Exception as e:
            raise SessionTeardownError(str(e)) from e
        logger.info("terminal session restored")

    def _set_mouse_off(self) -> None:
        self._output.disable_mouse_support()
        self._output.flush()

    def _watch_resize(self, stack: ExitStack) -> None:
        """
        Route SIGWINCH into a pipe that read_key() selects on.

        Signal handlers can only be installed from the main thread; elsewhere
        (and on platforms without SIGWINCH) resizes show on the next key.
        """
        if not hasattr(signal, "SIGWINCH"):
            return
        if threading.current_thread() is not threading.main_thread():
            logger.debug("not on the main thread, resize watching disabled")
            return

        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)
        stack.callback(os.close, read_fd)
        stack.callback(os.close, write_fd)

        def on_resize(signum, frame):
            try:
                os.write(write_fd, b"\0")
            except BlockingIOError:
                # Pipe full: a redraw is already pending
                pass

        previous = signal.signal(signal.SIGWINCH, on_resize)
        if previous is None:
            previous = signal.SIG_DFL
        stack.callback(signal.signal, signal.SIGWINCH, previous)
        self._resize_fd = read_fd
        stack.callback(setattr, self, "_resize_fd", None)

    def _drain_resize(self) -> None:
        try:
            while os.read(self._resize_fd, 64):
                pass
        except BlockingIOError:
            pass

    @staticmethod
    def _unwind(stack: ExitStack) -> None:
        """Undo a partial startup; the startup error is the one reported."""
        try:
            stack.close()
        except Exception:
            logger.exception("failed to undo partial terminal setup")

    # --- Drawing ---

    def draw(self, renderable: RenderableType) -> None:
        """Redraw the whole screen with renderable."""
        if self.console.is_alt_screen:
            self.console.update_screen(renderable)
        else:
            # Not a terminal (tests, pipes): emit one frame of console height
            self.console.print(renderable, height=self.console.height)

    # --- Input ---

    def read_key(self) -> KeyPress:
        """
        Block until the next key press is available and return it.

        A terminal resize returns RESIZE_EVENT so the caller redraws.

        Raises:
            EventReadError: input failed or reached end of stream
        """
        while not self._pending:
            try:
                watched = [self._input.fileno()]
                if self._resize_fd is not None:
                    watched.append(self._resize_fd)
                ready, _, _ = select.select(watched, [], [])
                if self._resize_fd in ready:
                    self._drain_resize()
                    logger.debug("terminal resized to %sx%s", self.console.width, self.console.height)
                    return RESIZE_EVENT
                self._pending.extend(self._input.read_keys())
                self._pending.extend(self._input.flush_keys())
            except (OSError, ValueError) as e:
                raise EventReadError(f"Could not read input: {e}") from e

            if not self._pending and self._input.closed:
                raise EventReadError("Input stream closed")

        return self._pending.popleft()
