"""
Command-line interface for Hookgate.

This module provides CLI commands for the authentication endpoints:
requesting dashboard access for an application and logging out a token.
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from hookgate.client import Hookgate
from hookgate.exceptions import ApiError, HookgateError
from hookgate.options import ClientOptions
from hookgate.version import __version__

TOKEN_ENV_VAR = "HOOKGATE_AUTH_TOKEN"
SERVER_URL_ENV_VAR = "HOOKGATE_SERVER_URL"


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="hookgate",
        description="Command-line client for the Hookgate API",
        epilog="Example: hookgate auth dashboard-access app_123",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--token",
        metavar="TOKEN",
        default=os.environ.get(TOKEN_ENV_VAR),
        help=f"Auth token (default: ${TOKEN_ENV_VAR})",
    )
    parser.add_argument(
        "--server-url",
        metavar="URL",
        default=os.environ.get(SERVER_URL_ENV_VAR),
        help=f"API base URL (default: ${SERVER_URL_ENV_VAR} or derived from token)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Auth command group
    auth_parser = subparsers.add_parser(
        "auth",
        help="Authentication commands",
        description="Request dashboard access or log out the current token",
    )
    auth_subparsers = auth_parser.add_subparsers(
        dest="auth_command",
        help="Authentication commands",
    )

    dashboard = auth_subparsers.add_parser(
        "dashboard-access",
        help="Get a pre-authenticated application portal URL",
    )
    dashboard.add_argument(
        "app_id",
        help="Application identifier (e.g., app_123)",
    )
    dashboard.add_argument(
        "--idempotency-key",
        metavar="KEY",
        help="Idempotency key for the request",
    )
    dashboard.add_argument(
        "--json",
        action="store_true",
        help="Print the full response as JSON",
    )

    logout = auth_subparsers.add_parser(
        "logout",
        help="Invalidate the auth token",
    )
    logout.add_argument(
        "--idempotency-key",
        metavar="KEY",
        help="Idempotency key for the request",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout is reserved for command output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def request_options_from_args(args: argparse.Namespace) -> dict:
    """Collect per-request options from parsed arguments."""
    options = {}
    if getattr(args, "idempotency_key", None):
        options["idempotency_key"] = args.idempotency_key
    return options


def create_client(args: argparse.Namespace) -> Hookgate:
    """
    Build a client from parsed arguments.

    Raises
    ------
    ConfigurationError
        If the token is missing or options are invalid
    """
    options = ClientOptions(
        server_url=args.server_url,
        timeout=args.timeout,
    )
    return Hookgate(args.token or "", options=options)


def format_error(error: HookgateError) -> str:
    """
    Format an error for display.

    Parameters
    ----------
    error : HookgateError
        Error to format

    Returns
    -------
    str
        Single-line message, with status code for API errors
    """
    if isinstance(error, ApiError) and error.status_code is not None:
        return f"Error ({error.status_code}): {error}"
    return f"Error: {error}"


def cmd_dashboard_access(args: argparse.Namespace) -> int:
    """
    Execute the auth dashboard-access command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    try:
        with create_client(args) as client:
            access = client.authentication.dashboard_access(
                args.app_id, request_options_from_args(args)
            )
    except HookgateError as e:
        print(format_error(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(access.to_dict(), indent=2))
    else:
        print(access.url)
    return 0


def cmd_logout(args: argparse.Namespace) -> int:
    """
    Execute the auth logout command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    try:
        with create_client(args) as client:
            client.authentication.logout(request_options_from_args(args))
    except HookgateError as e:
        print(format_error(e), file=sys.stderr)
        return 1

    print("Logged out")
    return 0


def cmd_auth(args: argparse.Namespace) -> int:
    """Dispatch auth subcommands."""
    if args.auth_command is None:
        print("Usage: hookgate auth <command>")
        print("Commands: dashboard-access, logout")
        print("Run 'hookgate auth <command> --help' for details")
        return 0

    if not args.token:
        print(
            f"Error: No auth token. Pass --token or set {TOKEN_ENV_VAR}",
            file=sys.stderr,
        )
        return 1

    if args.auth_command == "dashboard-access":
        return cmd_dashboard_access(args)

    if args.auth_command == "logout":
        return cmd_logout(args)

    print(f"Unknown auth command: {args.auth_command}", file=sys.stderr)
    return 1


def main(args: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments (defaults to sys.argv[1:])

    Returns
    -------
    int
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.verbose)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    if parsed_args.command == "auth":
        return cmd_auth(parsed_args)

    # Unknown command (shouldn't happen with argparse)
    print(f"Unknown command: {parsed_args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
