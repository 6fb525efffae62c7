"""Allow ``python -m adc`` invocation.

Delegates to the CLI error-boundary entry point so that ``python -m adc``
behaves identically to the ``adc`` console script.
"""

from __future__ import annotations

from adc.cli.app import cli

if __name__ == "__main__":
    cli()
