"""adc — Advanced Git Clone.

Clone repositories with a specific SSH key from ``~/.ssh`` by handing
git a ``GIT_SSH_COMMAND`` override for the one child process.
"""

from adc.version import __version__

__all__: list[str] = ["__version__"]
