"""Allow ``python -m rpncalc`` invocation."""

from __future__ import annotations

from rpncalc.cli import cli

if __name__ == "__main__":
    cli()
