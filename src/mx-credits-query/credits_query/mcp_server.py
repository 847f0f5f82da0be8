"""
MCP server exposing credits contract state read through a MultiversX proxy.
"""

import argparse
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from .config import load_config
from .logging_setup import configure_logging
from .service import CreditsService

server = FastMCP(
    name="mx-credits-query",
    instructions="Read the credits contract: paused flag, credits per EGLD, per-account credits.",
)

_service: Optional[CreditsService] = None


def _get_service() -> CreditsService:
    global _service
    if _service is None:
        cfg = load_config()
        configure_logging(cfg.log_level)
        _service = CreditsService(cfg)
    return _service


@server.tool(
    name="get_config",
    title="Get Config Snapshot",
    description="Return isContractPaused, creditsPerEGLD, walletURL, explorerURL and minimumBalance.",
)
def get_config() -> dict:
    svc = _get_service()
    return svc.get_config()


@server.tool(
    name="is_contract_paused",
    title="Is Contract Paused",
    description="Check the paused flag. Unavailable or failing contracts report is_paused=true.",
)
def is_contract_paused() -> dict:
    svc = _get_service()
    return svc.is_contract_paused()


@server.tool(
    name="get_credits_per_egld",
    title="Get Credits Per EGLD",
    description="Fetch the exchange rate of credits per EGLD.",
)
def get_credits_per_egld() -> dict:
    svc = _get_service()
    return svc.get_credits_per_egld()


@server.tool(
    name="get_credits",
    title="Get Account Credits",
    description="Fetch the credits balance for a numeric account id.",
)
def get_credits(account_id: Any) -> dict:
    """
    Fetch credits for one account. Not cached.
    """
    svc = _get_service()
    return svc.get_credits(account_id)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the credits query MCP server.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol for MCP.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--log-level",
        required=False,
        help="Log level for stderr output. Defaults to LOG_LEVEL env or INFO.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    # Build the service up front so a missing contract address fails at startup.
    svc = _get_service()
    if args.log_level:
        configure_logging(args.log_level)

    server.settings.host = args.host
    server.settings.port = args.port
    try:
        server.run(transport=args.transport)
    finally:
        svc.close()


if __name__ == "__main__":
    main()
