"""Core clone service — resolves a key and drives the git child process.

This service delegates filesystem probing to a
:class:`~adc.core.protocols.KeyStore` and process execution to a
:class:`~adc.core.protocols.CommandExecutor`, both injected at
construction time.  It is responsible for:

* Resolving the key name to a path under the configured SSH directory.
* Refusing to run git when that path does not exist.
* Building the transport override and the git argument list.
* Translating the child's exit status into :class:`CloneOutcome` or a
  typed :class:`~adc.exceptions.AdcError`.

Guarantees
----------
* No ``print()``, no direct filesystem or subprocess access.
* No ``sys.exit``; errors propagate to the CLI boundary.
"""

from __future__ import annotations

from adc.config import Settings
from adc.core.key_resolver import build_clone_args, build_ssh_command, resolve_key_path
from adc.core.models import CloneOutcome, ClonePlan, CloneRequest
from adc.core.protocols import CommandExecutor, KeyStore
from adc.exceptions import AdcError, ChildFailureError, ChildLaunchError, KeyNotFoundError


class CloneService:
    """Stateless service that turns a :class:`CloneRequest` into a clone.

    Parameters
    ----------
    settings:
        Resolved runtime settings (home directory, git executable).
    executor:
        Any object satisfying the :class:`CommandExecutor` protocol.
    key_store:
        Any object satisfying the :class:`KeyStore` protocol.
    """

    def __init__(
        self,
        settings: Settings,
        executor: CommandExecutor,
        key_store: KeyStore,
    ) -> None:
        self._settings: Settings = settings
        self._executor: CommandExecutor = executor
        self._key_store: KeyStore = key_store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def prepare(self, request: CloneRequest) -> ClonePlan:
        """Resolve and validate *request* without running anything.

        Raises
        ------
        KeyNotFoundError
            When ``~/.ssh/<key_name>`` does not exist.
        """
        settings = self._settings
        key_path = resolve_key_path(
            settings.home_dir,
            request.key_name,
            ssh_dir_name=settings.ssh_dir_name,
        )
        if not self._key_store.exists(key_path):
            raise KeyNotFoundError(
                request.key_name,
                key_path,
                hint=f"Expected a private key file inside {settings.ssh_dir}.",
            )

        ssh_command = build_ssh_command(key_path)
        return ClonePlan(
            key_name=request.key_name,
            key_path=key_path,
            ssh_command=ssh_command,
            program=settings.git_executable,
            args=build_clone_args(request.source_url, request.destination_dir),
            env={settings.ssh_command_env: ssh_command},
        )

    def execute(self, plan: ClonePlan) -> CloneOutcome:
        """Run git for *plan* and wait for it.

        Raises
        ------
        ChildLaunchError
            When git cannot be started.
        ChildFailureError
            When git exits non-zero or without an exit code.
        """
        try:
            exit_code = self._executor.run(plan.program, plan.args, env=plan.env)
        except AdcError:
            raise
        except OSError as exc:
            raise ChildLaunchError(
                f"Failed to execute git command: {exc}",
            ) from exc

        outcome = CloneOutcome(exit_code=exit_code)
        if not outcome.succeeded:
            raise ChildFailureError(outcome.exit_code)
        return outcome

    def run(self, request: CloneRequest) -> CloneOutcome:
        """Prepare and execute *request* in one step."""
        return self.execute(self.prepare(request))
