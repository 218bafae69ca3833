"""Command-line interface for ssi-client."""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Optional

from jose.exceptions import JWTError

from . import __version__
from .client import SSIClient
from .config import SSIClientSettings
from .logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssi-client",
        description="Build SSI credential request URLs and parse provider responses. "
        "Credentials are read from SSI_* environment variables.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # verify-url subcommand
    verify_url_parser = subparsers.add_parser(
        "verify-url", help="Build a credential verify request URL"
    )
    verify_url_parser.add_argument("type", help="Credential type to request")
    verify_url_parser.add_argument("request_id", help="Unique request identifier")

    # issue-url subcommand
    issue_url_parser = subparsers.add_parser(
        "issue-url", help="Build a credential issue request URL"
    )
    issue_url_parser.add_argument("type", help="Credential type to issue")
    issue_url_parser.add_argument("request_id", help="Unique request identifier")
    issue_url_parser.add_argument(
        "--data", "-d", default="{}", help="Credential attributes as a JSON object"
    )

    # parse-verify subcommand
    parse_verify_parser = subparsers.add_parser(
        "parse-verify", help="Validate and print a verify response token"
    )
    parse_verify_parser.add_argument("token", help="Response token from the provider")

    # parse-issue subcommand
    parse_issue_parser = subparsers.add_parser(
        "parse-issue", help="Validate and print an issue response token"
    )
    parse_issue_parser.add_argument("token", help="Response token from the provider")

    return parser


def _parse_data(raw: str) -> dict:
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("--data must be a JSON object")
    return data


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = SSIClientSettings()
        configure_logging(settings.log_level)
        client = SSIClient.from_settings(settings)

        if args.command == "verify-url":
            print(client.verify_url(args.type, args.request_id))
        elif args.command == "issue-url":
            print(client.issue_url(args.type, _parse_data(args.data), args.request_id))
        elif args.command == "parse-verify":
            response = client.parse_verify_response(args.token)
            print(response.model_dump_json(by_alias=True))
        elif args.command == "parse-issue":
            response = client.parse_issue_response(args.token)
            print(response.model_dump_json(by_alias=True))
    except (JWTError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
