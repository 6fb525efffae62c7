"""Runtime settings for adc.

:meth:`Settings.from_environ` is the only place in the codebase that
reads the process environment.  Everything below the CLI layer receives
an explicit :class:`Settings` instance, so core logic can be exercised
with any home directory without touching ``os.environ``.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass

from adc.exceptions import EnvironmentError

DEFAULT_GIT_EXECUTABLE: str = "git"
"""Executable used for the clone when ``ADC_GIT`` is not set."""

GIT_EXECUTABLE_ENV: str = "ADC_GIT"
"""Environment variable overriding the git executable."""

SSH_COMMAND_ENV: str = "GIT_SSH_COMMAND"
"""Variable git consults to replace its ``ssh`` invocation."""

SSH_DIR_NAME: str = ".ssh"


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for a single invocation."""

    home_dir: str
    """The caller's home directory, as found in the environment."""

    git_executable: str = DEFAULT_GIT_EXECUTABLE
    """Program name (or path) invoked with ``clone``."""

    ssh_dir_name: str = SSH_DIR_NAME
    """Directory under :attr:`home_dir` holding the named keys."""

    ssh_command_env: str = SSH_COMMAND_ENV
    """Name of the transport-override variable set for the child."""

    @property
    def ssh_dir(self) -> str:
        """``<home>/.ssh`` built with ``/`` separators."""
        return f"{self.home_dir}/{self.ssh_dir_name}"

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        system: str | None = None,
    ) -> Settings:
        """Build settings from *environ* (default: ``os.environ``).

        Raises
        ------
        EnvironmentError
            When no home directory can be determined.  No fallback
            location is attempted.
        """
        env = os.environ if environ is None else environ
        home = resolve_home_dir(env, system=system)
        git_executable = env.get(GIT_EXECUTABLE_ENV) or DEFAULT_GIT_EXECUTABLE
        return cls(home_dir=home, git_executable=git_executable)


def resolve_home_dir(
    environ: Mapping[str, str],
    *,
    system: str | None = None,
) -> str:
    """Return the home directory named by *environ*.

    ``HOME`` is used everywhere.  On Windows, where ``HOME`` is usually
    unset, ``USERPROFILE`` and then ``HOMEDRIVE`` + ``HOMEPATH`` are
    consulted as the platform equivalents.
    """
    home = environ.get("HOME")
    if home:
        return home

    if (system or platform.system()).lower() == "windows":
        profile = environ.get("USERPROFILE")
        if profile:
            return profile
        drive = environ.get("HOMEDRIVE")
        path = environ.get("HOMEPATH")
        if drive and path:
            return drive + path

    raise EnvironmentError(
        "Could not determine HOME directory",
        hint="Set the HOME environment variable and retry.",
    )
