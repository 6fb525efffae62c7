"""CLI application entry point and command routing for adc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~adc.exceptions.AdcError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core
  service and the infrastructure adapters.
* Status lines go to stdout via :data:`console`; diagnostics go to
  stderr via :data:`err_console`.
* This module is the only place that reads the process environment
  (through :meth:`Settings.from_environ`) and the only place that
  translates between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from adc.cli import exit_codes
from adc.cli.console import console, err_console, escape
from adc.exceptions import AdcError
from adc.version import __version__

DOCTOR_COMMAND: str = "doctor"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _key_name(value: str) -> str:
    """argparse ``type`` rejecting an empty key name."""
    if not value:
        raise argparse.ArgumentTypeError("SSH key name must not be empty")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``adc --ssh <name> <url> [<directory>]`` — clone with a named key
    * ``adc doctor``  — environment diagnostics
    * ``adc --version``
    """
    parser = argparse.ArgumentParser(
        prog="adc",
        description="Advanced Git Clone - Clone repositories with specific SSH keys",
        epilog="Run 'adc doctor' to check that git and ssh are available.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--ssh",
        required=True,
        metavar="NAME",
        type=_key_name,
        help="SSH key name to use for cloning (a file name under ~/.ssh)",
    )
    parser.add_argument(
        "url",
        help="SSH URL of the repository to clone",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory name for the cloned repository (optional)",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_clone(key_name: str, url: str, directory: str | None) -> int:
    """Dispatch a clone with the named key.

    Flow:
    1. Resolve settings from the environment.
    2. Instantiate infra adapters + the core service.
    3. Resolve and validate the key path.
    4. Report what is about to happen, then run git.
    """
    from adc.config import Settings
    from adc.core.clone_service import CloneService
    from adc.core.models import CloneRequest
    from adc.infra.local_key_store import LocalKeyStore
    from adc.infra.subprocess_executor import SubprocessExecutor

    settings = Settings.from_environ()
    service = CloneService(settings, SubprocessExecutor(), LocalKeyStore())

    request = CloneRequest(
        key_name=key_name,
        source_url=url,
        destination_dir=directory,
    )
    plan = service.prepare(request)

    console.print(f"Cloning repository with SSH key: {escape(plan.key_name)}")
    console.print(f"Repository URL: {escape(request.source_url)}")

    service.execute(plan)

    console.print("[bold green]Repository cloned successfully![/bold green]")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from adc.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the adc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()

    if argv == [DOCTOR_COMMAND]:
        return _handle_doctor()

    args = parser.parse_args(argv)
    return _handle_clone(args.ssh, args.url, args.directory)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AdcError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
