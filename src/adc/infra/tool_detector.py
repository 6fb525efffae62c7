"""Infrastructure: git / ssh detection and platform guidance.

This module is responsible for locating the external tools adc relies
on and for providing platform-specific installation guidance when one
of them is missing.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH lookup for one executable.

    Attributes
    ----------
    name : str
        The executable that was looked up (e.g. ``"git"``).
    found : bool
        Whether it was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Look up *name* on PATH.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present; the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands(name),
    )


def detect_git(executable: str = "git") -> ToolStatus:
    return detect_tool(executable)


def detect_ssh() -> ToolStatus:
    return detect_tool("ssh")


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    system = platform.system().lower()
    if name == "ssh":
        if system == "windows":
            return ("Add-WindowsCapability -Online -Name OpenSSH.Client~~~~0.0.1.0",)
        if system == "linux":
            return (
                "sudo apt install openssh-client",
                "sudo dnf install openssh-clients",
                "sudo pacman -S openssh",
            )
        if system == "darwin":
            return ("brew install openssh",)
        return ("Please install an OpenSSH client from https://www.openssh.com/",)

    if system == "windows":
        return (
            "winget install Git.Git",
            "choco install git",
        )
    if system == "linux":
        return (
            "sudo apt install git",
            "sudo dnf install git",
            "sudo pacman -S git",
        )
    if system == "darwin":
        return ("xcode-select --install", "brew install git")
    # Generic guidance.
    return ("Please install git from https://git-scm.com/downloads",)
