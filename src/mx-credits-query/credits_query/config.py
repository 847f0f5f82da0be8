import os
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_MINIMUM_BALANCE = 0.05

# Default endpoints per network; explicit env values always win.
NETWORK_DEFAULTS: Dict[str, Dict[str, str]] = {
    "mainnet": {
        "proxy_url": "https://gateway.multiversx.com",
        "wallet_url": "https://wallet.multiversx.com",
        "explorer_url": "https://explorer.multiversx.com",
    },
    "devnet": {
        "proxy_url": "https://devnet-gateway.multiversx.com",
        "wallet_url": "https://devnet-wallet.multiversx.com",
        "explorer_url": "https://devnet-explorer.multiversx.com",
    },
    "testnet": {
        "proxy_url": "https://testnet-gateway.multiversx.com",
        "wallet_url": "https://testnet-wallet.multiversx.com",
        "explorer_url": "https://testnet-explorer.multiversx.com",
    },
}


@dataclass
class Config:
    contract_address: str
    proxy_url: str
    wallet_url: str
    explorer_url: str
    network: str = "mainnet"
    minimum_balance: float = DEFAULT_MINIMUM_BALANCE
    request_timeout: float = 10
    log_level: str = "INFO"


def resolve_network_defaults(network: str) -> Dict[str, str]:
    """Return default endpoints for a known network name."""
    normalized = (network or "").strip().lower()
    if normalized in NETWORK_DEFAULTS:
        return NETWORK_DEFAULTS[normalized]

    allowed = ", ".join(sorted(NETWORK_DEFAULTS.keys()))
    raise ValueError(
        f"Unknown network '{network}'. Supported: {allowed}. "
        "Set PROXY_URL, WALLET_URL and EXPLORER_URL explicitly for other networks."
    )


def _env_url(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().rstrip("/")


def load_config() -> Config:
    """Load configuration from environment variables."""
    contract_address = (os.getenv("CREDITS_CONTRACT_ADDRESS") or "").strip()
    if not contract_address:
        raise ValueError("CREDITS_CONTRACT_ADDRESS is required but not set.")

    network = os.getenv("NETWORK", "mainnet").strip().lower()
    proxy_url = _env_url("PROXY_URL")
    wallet_url = _env_url("WALLET_URL")
    explorer_url = _env_url("EXPLORER_URL")

    if not (proxy_url and wallet_url and explorer_url):
        defaults = resolve_network_defaults(network)
        proxy_url = proxy_url or defaults["proxy_url"]
        wallet_url = wallet_url or defaults["wallet_url"]
        explorer_url = explorer_url or defaults["explorer_url"]

    minimum_balance = float(os.getenv("MINIMUM_BALANCE", str(DEFAULT_MINIMUM_BALANCE)))
    timeout = float(os.getenv("REQUEST_TIMEOUT", "10"))
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    return Config(
        contract_address=contract_address,
        proxy_url=proxy_url,
        wallet_url=wallet_url,
        explorer_url=explorer_url,
        network=network,
        minimum_balance=minimum_balance,
        request_timeout=timeout,
        log_level=log_level,
    )
