"""Domain models for adc.

All models are **frozen** dataclasses: immutable value objects that
live for a single invocation.  They carry no I/O and no dependencies on
external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Invocation arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CloneRequest:
    """What the user asked for on the command line."""

    key_name: str
    """File name of the key under ``~/.ssh`` (not a path)."""

    source_url: str
    """Repository URL, passed to git uninterpreted."""

    destination_dir: str | None = None
    """Optional target directory, passed to git uninterpreted."""


# ---------------------------------------------------------------------------
# Resolved invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClonePlan:
    """A fully resolved, validated git invocation ready to execute."""

    key_name: str
    key_path: str
    ssh_command: str
    program: str
    args: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)
    """Variables overlaid on the parent environment for the child only."""


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CloneOutcome:
    """Exit status of the git child process."""

    exit_code: int | None
    """Child exit code, or ``None`` when it was killed by a signal."""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
