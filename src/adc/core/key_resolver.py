"""Pure string construction for key paths and the git invocation.

Nothing here touches the filesystem or the environment; every function
is a deterministic transform of its arguments.
"""

from __future__ import annotations

import shlex

from adc.config import SSH_DIR_NAME

STRICT_HOST_KEY_OPTION: str = "StrictHostKeyChecking=no"
"""Always passed to ssh; suppresses host-key verification prompts."""


def resolve_key_path(
    home_dir: str,
    key_name: str,
    *,
    ssh_dir_name: str = SSH_DIR_NAME,
) -> str:
    """Return ``<home_dir>/<ssh_dir_name>/<key_name>``.

    *key_name* is joined verbatim: separators or ``..`` segments inside
    it are not rejected or normalised.
    """
    return f"{home_dir}/{ssh_dir_name}/{key_name}"


def build_ssh_command(key_path: str) -> str:
    """Return the ``GIT_SSH_COMMAND`` value forcing *key_path*.

    git hands this string to a shell, so the path is quoted when it
    contains whitespace or shell metacharacters.  Ordinary paths are
    embedded unchanged::

        >>> build_ssh_command("/home/alice/.ssh/work_key")
        'ssh -i /home/alice/.ssh/work_key -o StrictHostKeyChecking=no'
    """
    return f"ssh -i {shlex.quote(key_path)} -o {STRICT_HOST_KEY_OPTION}"


def build_clone_args(
    source_url: str,
    destination_dir: str | None = None,
) -> tuple[str, ...]:
    """Return the git arguments: ``clone <url> [<directory>]``."""
    if destination_dir is None:
        return ("clone", source_url)
    return ("clone", source_url, destination_dir)
