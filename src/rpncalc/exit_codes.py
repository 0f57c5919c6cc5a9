"""Exit-code constants used by the command-line front end."""

from __future__ import annotations

SUCCESS: int = 0
"""Calculation printed, or help/version shown."""

USAGE_ERROR: int = 1
"""Malformed invocation. The message is followed by the usage text."""

RUNTIME_ERROR: int = 2
"""Valid invocation that cannot be computed (overflow, division by zero, bad domain)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
