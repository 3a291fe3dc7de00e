"""
FILE: jotter/__init__.py
PURPOSE: Top-level package for the Jotter terminal task list editor
NOTES:
  - Installs a NullHandler so nothing is logged unless --log-file is given
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
