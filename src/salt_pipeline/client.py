"""SaltClient - pipeline helpers on top of the Salt API."""

import logging

from .core import (
    CLIENT_LOCAL,
    CLIENT_LOCAL_BATCH,
    CLIENT_RUNNER,
    CLIENT_WHEEL,
    Connection,
    Target,
    check_result,
    connection,
    print_salt_command_result,
    print_salt_state_result,
    run_salt_command,
)
from .interfaces import CredentialStore, HttpClient

logger = logging.getLogger(__name__)


class SaltClient:
    """Helper functions for common Salt operations.

    Each helper builds one Salt API call and returns the raw response.
    Uses dependency injection for the HTTP client and the connection.
    """

    def __init__(self, http: HttpClient, master: Connection):
        """
        Initialize the client.

        Args:
            http: HTTP client used for every request.
            master: Authenticated Salt connection.
        """
        self.http = http
        self.master = master

    @classmethod
    def connect(
        cls,
        http: HttpClient,
        credential_store: CredentialStore,
        url: str,
        credentials_id: str = "salt",
        eauth: str = "pam",
    ) -> "SaltClient":
        """Log in to the Salt API and return a client bound to the new connection."""
        master = connection(http, credential_store, url, credentials_id=credentials_id, eauth=eauth)
        return cls(http, master)

    def run(
        self,
        client: str,
        target: Target | str,
        function: str,
        batch: bool | None = None,
        args: list | None = None,
        kwargs: dict | None = None,
    ) -> dict:
        """Run an arbitrary function through the Salt API."""
        return run_salt_command(
            self.http, self.master, client, target, function, batch=batch, args=args, kwargs=kwargs
        )

    def get_pillar(self, target: Target | str, pillar: str | None = None) -> dict:
        """
        Return pillar data for a target.

        Args:
            target: Target to read pillar from.
            pillar: Dotted pillar key (optional, whole pillar when None).
        """
        if pillar is not None:
            return self.run(CLIENT_LOCAL, target, "pillar.get", args=[pillar.replace(".", ":")])
        return self.run(CLIENT_LOCAL, target, "pillar.data")

    def get_grain(self, target: Target | str, grain: str | None = None) -> dict:
        """
        Return grain data for a target.

        Args:
            target: Target to read grains from.
            grain: Grain name (optional, all grains when None).
        """
        if grain is not None:
            return self.run(CLIENT_LOCAL, target, "grain.item", args=[grain])
        return self.run(CLIENT_LOCAL, target, "grain.items")

    def enforce_state(
        self,
        target: Target | str,
        state: str | list[str],
        output: bool = True,
        fail_on_error: bool = True,
    ) -> dict:
        """
        Enforce one or more states on a target.

        Args:
            target: State enforcing target.
            state: State name or list of state names.
            output: Print changed resources.
            fail_on_error: Raise SaltStateError when a resource fails.

        Returns:
            The Salt API response.
        """
        run_states = state if isinstance(state, str) else ",".join(state)

        logger.info(f"Enforcing state {run_states} on {Target.coerce(target).expression}")

        out = self.run(CLIENT_LOCAL, target, "state.sls", args=[run_states])
        self._check_and_print(out, output, fail_on_error)
        return out

    def cmd_run(self, target: Target | str, cmd: str) -> dict:
        """Run a shell command on a target (cmd.run wrapper)."""
        logger.info(f"Running command {cmd} on {Target.coerce(target).expression}")
        return self.run(CLIENT_LOCAL, target, "cmd.run", args=[cmd])

    def sync_all(self, target: Target | str) -> dict:
        """Perform a complete salt sync between master and target."""
        return self.run(CLIENT_LOCAL, target, "saltutil.sync_all")

    def enforce_highstate(
        self,
        target: Target | str,
        output: bool = False,
        fail_on_error: bool = True,
    ) -> dict:
        """
        Enforce highstate on a target.

        Args:
            target: Highstate enforcing target.
            output: Print changed resources.
            fail_on_error: Raise SaltStateError when a resource fails.
        """
        out = self.run(CLIENT_LOCAL, target, "state.highstate")
        self._check_and_print(out, output, fail_on_error)
        return out

    def generate_node_key(self, target: Target | str, host: str, keysize: int = 4096) -> dict:
        """Generate and accept a minion key using key.gen_accept."""
        return self.run(CLIENT_WHEEL, target, "key.gen_accept", args=[host], kwargs={"keysize": keysize})

    def generate_node_metadata(
        self,
        target: Target | str,
        host: str,
        classes: list[str],
        parameters: dict,
    ) -> dict:
        """Generate reclass node metadata for a host."""
        return self.run(
            CLIENT_LOCAL,
            target,
            "reclass.node_create",
            args=[host, "_generated"],
            kwargs={"classes": classes, "parameters": parameters},
        )

    def orchestrate_system(self, target: Target | str, orchestrate: str) -> dict:
        """Run a salt orchestrate runner."""
        return self.run(CLIENT_RUNNER, target, "state.orchestrate", args=[orchestrate])

    def run_salt_process_step(
        self,
        tgt: Target | str,
        fun: str,
        arg: list | None = None,
        batch: bool | None = None,
        output: bool = False,
    ) -> dict:
        """
        Run a single process step.

        Args:
            tgt: Step target.
            fun: Function to run.
            arg: Function arguments.
            batch: Use the local_batch client when True.
            output: Print the command result.

        Returns:
            The Salt API response.
        """
        logger.info(f"Running step {fun} on {Target.coerce(tgt).expression}")

        if batch is True:
            out = self.run(CLIENT_LOCAL_BATCH, tgt, fun, args=arg)
        else:
            out = self.run(CLIENT_LOCAL, tgt, fun, args=arg)

        if output:
            print_salt_command_result(out)

        return out

    def _check_and_print(self, out: dict, output: bool, fail_on_error: bool) -> None:
        """Check a state result, printing it even when the check raises."""
        try:
            check_result(out, fail_on_error)
        finally:
            if output:
                print_salt_state_result(out)
