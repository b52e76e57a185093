"""Command-line interface for salt-pipeline."""

import argparse
import logging
import sys
from dataclasses import replace

from .client import SaltClient
from .config import Config, load_config
from .core import Target, print_salt_command_result
from .exceptions import SaltPipelineError
from .interfaces import CredentialStore
from .providers import EnvCredentialStore, FileCredentialStore
from .transport import RequestsHttpClient


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="salt-pipeline - Run Salt commands through the Salt API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -u https://salt:8000 cmd 'I@linux:system' uptime
  %(prog)s -c config.yaml state 'ctl*' linux.system ntp
  %(prog)s -c config.yaml highstate 'cmp01*' --output
  %(prog)s -c config.yaml pillar 'cfg01*' linux.network.fqdn
  %(prog)s -c config.yaml step 'I@nova:compute' service.restart nova-compute --batch
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-u", "--url",
        metavar="URL",
        help="Salt API server URL",
    )

    parser.add_argument(
        "--credentials-id",
        metavar="ID",
        help="Credential store entry to log in with",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-output",
        action="store_true",
        help="Don't print command results",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    cmd = subparsers.add_parser("cmd", help="Run a shell command (cmd.run)")
    cmd.add_argument("target")
    cmd.add_argument("cmd", nargs="+")

    state = subparsers.add_parser("state", help="Enforce states (state.sls)")
    state.add_argument("target")
    state.add_argument("states", nargs="+", metavar="STATE")
    state.add_argument("--no-fail", action="store_true", help="Log failed states instead of failing")

    highstate = subparsers.add_parser("highstate", help="Enforce highstate")
    highstate.add_argument("target")
    highstate.add_argument("--no-fail", action="store_true", help="Log failed states instead of failing")
    highstate.add_argument("--output", action="store_true", help="Print changed resources")

    pillar = subparsers.add_parser("pillar", help="Get pillar data")
    pillar.add_argument("target")
    pillar.add_argument("pillar", nargs="?")

    grain = subparsers.add_parser("grain", help="Get grain data")
    grain.add_argument("target")
    grain.add_argument("grain", nargs="?")

    sync = subparsers.add_parser("sync", help="Sync all modules (saltutil.sync_all)")
    sync.add_argument("target")

    step = subparsers.add_parser("step", help="Run a single process step")
    step.add_argument("target")
    step.add_argument("fun")
    step.add_argument("arg", nargs="*")
    step.add_argument("--batch", action="store_true", help="Use the local_batch client")

    orchestrate = subparsers.add_parser("orchestrate", help="Run state.orchestrate")
    orchestrate.add_argument("orchestrate")
    orchestrate.add_argument("--target", default="*", help="Orchestration target (default: *)")

    return parser.parse_args(argv)


def build_credential_store(config: Config) -> CredentialStore:
    """
    Create the credential store named in the configuration.

    Raises:
        ValueError: If the store kind is unknown.
        FileNotFoundError: If the credentials file is missing.
    """
    if config.credentials_store == "file":
        return FileCredentialStore(config.get_credentials_path())
    if config.credentials_store == "env":
        return EnvCredentialStore(prefix=config.env_prefix)
    raise ValueError(f"Unknown credential store: {config.credentials_store}")


def run_command(client: SaltClient, args: argparse.Namespace) -> dict:
    """Dispatch a parsed subcommand to the matching SaltClient helper."""
    output = not args.no_output
    target = Target.coerce(getattr(args, "target", "*"))

    if args.command == "state":
        return client.enforce_state(target, args.states, output=output, fail_on_error=not args.no_fail)

    if args.command == "highstate":
        return client.enforce_highstate(
            target, output=args.output and output, fail_on_error=not args.no_fail
        )

    if args.command == "step":
        return client.run_salt_process_step(target, args.fun, arg=args.arg, batch=args.batch, output=output)

    if args.command == "cmd":
        out = client.cmd_run(target, " ".join(args.cmd))
    elif args.command == "pillar":
        out = client.get_pillar(target, args.pillar)
    elif args.command == "grain":
        out = client.get_grain(target, args.grain)
    elif args.command == "sync":
        out = client.sync_all(target)
    elif args.command == "orchestrate":
        out = client.orchestrate_system(target, args.orchestrate)
    else:
        raise ValueError(f"Unknown command: {args.command}")

    if output:
        print_salt_command_result(out)
    return out


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.url:
        config = replace(config, url=args.url)
    if args.credentials_id:
        config = replace(config, credentials_id=args.credentials_id)

    if not config.url:
        logger.error("No Salt API URL given; use -u or set salt.url in the config file")
        return 1

    http = RequestsHttpClient(timeout=config.timeout, verify=config.verify_ssl)
    try:
        store = build_credential_store(config)
        client = SaltClient.connect(
            http, store, config.url, credentials_id=config.credentials_id, eauth=config.eauth
        )
        run_command(client, args)
    except (SaltPipelineError, FileNotFoundError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        http.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
