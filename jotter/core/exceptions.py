"""
FILE: jotter/core/exceptions.py
PURPOSE: Custom exception classes for terminal session errors
EXPORTS:
  - JotterError (base exception)
  - SessionSetupError
  - EventReadError
  - SessionTeardownError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from JotterError for easy catching
  - Only terminal/session failures are errors; user keys never raise
  - Session layer raises these, tui.main catches and reports
"""


class JotterError(Exception):
    """Base exception for all Jotter errors."""
    pass


class SessionSetupError(JotterError):
    """Terminal could not be put into interactive mode."""

    def __init__(self, step: str, reason: str = ""):
        self.step = step
        message = f"Could not {step}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EventReadError(JotterError):
    """Reading the next input event failed."""

    def __init__(self, message: str):
        super().__init__(message)


class SessionTeardownError(JotterError):
    """Terminal could not be restored to its original mode."""

    def __init__(self, reason: str):
        super().__init__(f"Could not restore terminal: {reason}")
