from typing import Any, Dict, Optional

import structlog

from .cache import Cacher, MemoryCache
from .config import Config
from .config_handler import ConfigHandler
from .contract_query import ContractQueryHandler
from .errors import ContractPausedCheckError
from .proxy_client import ProxyClient
from .vm_query import BlockchainDataProvider

logger = structlog.get_logger()


class CreditsService:
    """Combine configuration, cache, and proxy client to serve credits contract state."""

    def __init__(
        self,
        config: Config,
        data_provider: Optional[BlockchainDataProvider] = None,
        cache: Optional[Cacher] = None,
    ) -> None:
        self.config = config
        self._owns_client = data_provider is None
        if data_provider is None:
            data_provider = ProxyClient(config.proxy_url, timeout=config.request_timeout)
        self.data_provider = data_provider
        self.cache = cache if cache is not None else MemoryCache()

        self.contract_handler = ContractQueryHandler(
            self.data_provider,
            config.contract_address,
            self.cache,
        )
        self.config_handler = ConfigHandler(
            config.wallet_url,
            config.explorer_url,
            self.contract_handler,
            config.minimum_balance,
        )
        logger.info(
            "credits_service_ready",
            contract=config.contract_address,
            network=config.network,
        )

    def get_config(self) -> Dict[str, Any]:
        return dict(self.config_handler.get_config())

    def is_contract_paused(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"contract": self.config.contract_address}
        try:
            result["is_paused"] = self.contract_handler.is_contract_paused()
        except ContractPausedCheckError as exc:
            result["is_paused"] = exc.paused
            result["error"] = str(exc)
        return result

    def get_credits_per_egld(self) -> Dict[str, Any]:
        return {
            "contract": self.config.contract_address,
            "credits_per_egld": self.contract_handler.get_credits_per_egld(),
        }

    def get_credits(self, account_id: Any) -> Dict[str, Any]:
        normalized_id = self._normalize_account_id(account_id)
        return {
            "contract": self.config.contract_address,
            "id": normalized_id,
            "credits": self.contract_handler.get_credits(normalized_id),
        }

    def close(self) -> None:
        if self._owns_client and isinstance(self.data_provider, ProxyClient):
            self.data_provider.close()

    def _normalize_account_id(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError("id must be a non-negative integer.")
        if isinstance(value, int):
            parsed = value
        elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
            parsed = int(value.strip())
        else:
            raise ValueError("id must be a non-negative integer.")
        if parsed < 0:
            raise ValueError("id must be a non-negative integer.")
        return parsed
