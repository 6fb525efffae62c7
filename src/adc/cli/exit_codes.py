"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: git exited 0."""

GENERAL_ERROR: int = 1
"""A known AdcError was caught and its message was displayed.

Covers an undeterminable HOME, a missing key file, git failing to
launch, and git exiting non-zero or without an exit code.
"""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries.

Shares its value with argparse usage errors.
"""
