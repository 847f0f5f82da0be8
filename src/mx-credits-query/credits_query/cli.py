import argparse
import json
import sys
from typing import Optional

from .config import load_config
from .logging_setup import configure_logging
from .service import CreditsService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query the credits contract through a MultiversX proxy.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        required=False,
        help="Log level for stderr output. Defaults to LOG_LEVEL env or INFO.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="Print the config snapshot (paused flag, rate, URLs)")
    subparsers.add_parser("paused", help="Check whether the contract is paused")
    subparsers.add_parser("rate", help="Fetch credits per EGLD")

    credits_parser = subparsers.add_parser("credits", help="Fetch credits for an account id")
    credits_parser.add_argument(
        "--id",
        required=True,
        type=int,
        help="Numeric account identifier.",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    service: Optional[CreditsService] = None
    try:
        config = load_config()
        configure_logging(args.log_level or config.log_level)
        service = CreditsService(config)

        if args.command == "config":
            result = service.get_config()
        elif args.command == "paused":
            result = service.is_contract_paused()
        elif args.command == "rate":
            result = service.get_credits_per_egld()
        else:
            result = service.get_credits(args.id)
        print(json.dumps(result, indent=2))
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        if service is not None:
            service.close()


if __name__ == "__main__":
    main()
