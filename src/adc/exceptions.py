"""Custom exception hierarchy for adc.

All exceptions that cross layer boundaries must inherit from
:class:`AdcError`.  Raw ``OSError`` / ``subprocess`` exceptions must
NEVER propagate beyond the infrastructure layer; they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
AdcError
├── EnvironmentError
├── KeyNotFoundError
├── ChildLaunchError
└── ChildFailureError
"""

from __future__ import annotations


class AdcError(Exception):
    """Base exception for all adc errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AdcError):
    """Raised when the runtime environment cannot satisfy a request.

    Covers an undeterminable home directory as well as a missing
    optional UI dependency.
    """


# --- Key resolution --------------------------------------------------------

class KeyNotFoundError(AdcError):
    """Raised when the resolved SSH key path does not exist."""

    def __init__(
        self,
        key_name: str,
        key_path: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            f"SSH key '{key_name}' not found at path: {key_path}",
            hint=hint,
        )
        self.key_name: str = key_name
        self.key_path: str = key_path


# --- Child process ---------------------------------------------------------

class ChildLaunchError(AdcError):
    """Raised when the git executable could not be started at all."""


class ChildFailureError(AdcError):
    """Raised when git ran but did not exit cleanly.

    ``exit_code`` is ``None`` when the child was terminated by a signal
    and therefore reported no exit code.
    """

    def __init__(
        self,
        exit_code: int | None,
        *,
        hint: str | None = None,
    ) -> None:
        if exit_code is None:
            message = "Git clone failed: no exit code available (terminated by signal)"
        else:
            message = f"Git clone failed with exit code: {exit_code}"
        super().__init__(message, hint=hint)
        self.exit_code: int | None = exit_code
