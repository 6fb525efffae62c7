"""``adc doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether
the runtime environment can run a clone: git and ssh on PATH, and an
SSH directory to pick keys from.

This module lives in the CLI layer; it may import from ``infra`` and
``config``, and it renders via Rich when available.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from adc.cli import exit_codes
from adc.cli.console import console, escape
from adc.config import Settings
from adc.exceptions import EnvironmentError
from adc.infra.tool_detector import ToolStatus, detect_git, detect_ssh
from adc.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _adc_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the adc version row."""
    return "adc", __version__, _OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(status: ToolStatus, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for a PATH lookup row."""
    if status.found:
        return status.name, str(status.path) if status.path else "found", _OK
    return status.name, "not found", _FAIL if required else _WARN


def _ssh_dir_check(settings: Settings | None) -> tuple[str, str, str]:
    """Return (label, value, status) for the ``~/.ssh`` row."""
    if settings is None:
        return "SSH dir", "HOME not set", _WARN
    ssh_dir = settings.ssh_dir
    if Path(ssh_dir).is_dir():
        return "SSH dir", ssh_dir, _OK
    return "SSH dir", f"{ssh_dir} (missing)", _WARN


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _load_settings() -> Settings | None:
    try:
        return Settings.from_environ()
    except EnvironmentError:
        return None


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nadc doctor")
    print("=" * 64)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}")
    print("-" * 64)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}")
    print()


def _print_rich_table(checks: list[tuple[str, str, str]]) -> None:
    from rich.table import Table

    table = Table(
        title="adc doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    settings = _load_settings()
    git_status = detect_git(settings.git_executable if settings else "git")
    ssh_status = detect_ssh()

    checks = [
        _adc_version_check(),
        _python_version_check(),
        _tool_check(git_status, required=True),
        _tool_check(ssh_status, required=False),
        _ssh_dir_check(settings),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        _print_rich_table(checks)
    except ModuleNotFoundError:
        _print_plain_table(checks)

    for tool in (git_status, ssh_status):
        if not tool.found and tool.install_commands:
            console.print(f"[yellow]{tool.name} is not installed.[/yellow]")
            console.print("Install using one of the following commands:\n")
            for cmd in tool.install_commands:
                console.print(f"  [bold]{escape(cmd)}[/bold]")
            console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
