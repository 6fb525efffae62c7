"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: spawning
git and probing the filesystem and PATH.  Every raw ``OSError`` must be
caught here and re-raised as an :class:`~adc.exceptions.AdcError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from adc.infra.local_key_store import LocalKeyStore
from adc.infra.subprocess_executor import SubprocessExecutor
from adc.infra.tool_detector import ToolStatus, detect_git, detect_ssh, detect_tool

__all__: list[str] = [
    "LocalKeyStore",
    "SubprocessExecutor",
    "ToolStatus",
    "detect_git",
    "detect_ssh",
    "detect_tool",
]
