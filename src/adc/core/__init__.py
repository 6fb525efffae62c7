"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem, environment or subprocess access; those arrive
  through the protocols in :mod:`adc.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from adc.core.clone_service import CloneService
from adc.core.models import CloneOutcome, ClonePlan, CloneRequest
from adc.core.protocols import CommandExecutor, KeyStore

__all__: list[str] = [
    "CloneOutcome",
    "ClonePlan",
    "CloneRequest",
    "CloneService",
    "CommandExecutor",
    "KeyStore",
]
