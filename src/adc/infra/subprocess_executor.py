""":mod:`subprocess` backed implementation of :class:`~adc.core.protocols.CommandExecutor`.

This module is the **only** place in the codebase that spawns a child
process.  Launch failures are caught here and re-raised as
:class:`~adc.exceptions.ChildLaunchError`.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence

from adc.exceptions import ChildLaunchError


class SubprocessExecutor:
    """Concrete :class:`CommandExecutor` using :func:`subprocess.run`.

    The child inherits this process's stdin/stdout/stderr, so git's own
    progress output and any passphrase prompt reach the terminal
    directly.
    """

    @staticmethod
    def _build_env(overlay: Mapping[str, str] | None) -> dict[str, str]:
        """Return a copy of ``os.environ`` with *overlay* applied."""
        env = dict(os.environ)
        if overlay:
            env.update(overlay)
        return env

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(
        self,
        program: str,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
    ) -> int | None:
        """Run *program* and block until it exits.

        Returns
        -------
        int | None
            The exit code, or ``None`` when the child was terminated by
            a signal (``subprocess`` reports those as negative codes).

        Raises
        ------
        ChildLaunchError
            When the executable is missing or cannot be started.
        """
        try:
            completed = subprocess.run(
                [program, *args],
                env=self._build_env(env),
                check=False,
            )
        except FileNotFoundError as exc:
            raise ChildLaunchError(
                f"Failed to execute git command: {exc}",
                hint=f"Is '{program}' installed and on PATH? Run 'adc doctor' to check.",
            ) from exc
        except OSError as exc:
            raise ChildLaunchError(
                f"Failed to execute git command: {exc}",
            ) from exc

        if completed.returncode < 0:
            return None
        return completed.returncode
