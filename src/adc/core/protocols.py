"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol


class CommandExecutor(Protocol):
    """Contract for running an external program to completion.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(
        self,
        program: str,
        args: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
    ) -> int | None:
        """Run *program* with *args* and wait for it to finish.

        Parameters
        ----------
        program:
            Executable name or path.
        args:
            Positional arguments, not including the program itself.
        env:
            Variables overlaid on a copy of the parent environment for
            the child only.  The parent's own environment is untouched.

        Returns
        -------
        int | None
            The child's exit code, or ``None`` when it terminated
            without one (e.g. killed by a signal).

        Raises
        ------
        ChildLaunchError
            When the program cannot be started.
        """
        ...  # pragma: no cover


class KeyStore(Protocol):
    """Contract for checking whether a key path exists."""

    def exists(self, path: str) -> bool:
        """Return ``True`` if *path* names any existing filesystem entry."""
        ...  # pragma: no cover
