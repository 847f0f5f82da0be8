from typing import Optional, Sequence

import structlog

from .cache import Cacher
from .decoder import decode_uint64, encode_uint64_arg
from .errors import ContractPausedCheckError, InvalidArgumentError
from .vm_query import (
    CONTRACT_NOT_FOUND,
    RETURN_CODE_OK,
    BlockchainDataProvider,
    VmValueRequest,
    VmValuesResponse,
)

logger = structlog.get_logger()

IS_PAUSED_FUNC = "isPaused"
CREDITS_PER_EGLD_FUNC = "getCreditsPerEgld"
GET_CREDITS_FUNC = "getCredits"

KEY_IS_PAUSED = "isPaused"
KEY_CREDITS_PER_EGLD = "creditsPerEgld"


class ContractQueryHandler:
    """Read credits contract state through VM queries, caching the contract-wide values."""

    def __init__(
        self,
        data_provider: Optional[BlockchainDataProvider],
        contract_address: str,
        cache: Optional[Cacher],
    ) -> None:
        if data_provider is None:
            raise InvalidArgumentError("nil blockchain data provider")
        if not contract_address:
            raise InvalidArgumentError("empty contract address")
        if cache is None:
            raise InvalidArgumentError("nil cache")

        self.data_provider = data_provider
        self.contract_address = contract_address
        self.cache = cache

    def is_contract_paused(self) -> bool:
        """Return the paused flag, treating every ambiguous outcome as paused.

        Any failure of the query call raises ContractPausedCheckError, whose ``paused``
        attribute is always True. A missing contract or a non-ok return code
        yields True without raising. Only decoded answers are cached.
        """
        cached, found = self.cache.get(KEY_IS_PAUSED)
        if found:
            logger.debug("contract_cache_hit", key=KEY_IS_PAUSED)
            return bool(cached)

        try:
            response = self._query(IS_PAUSED_FUNC)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("contract_pause_fail_safe", reason="query_error", error=str(exc))
            raise ContractPausedCheckError(str(exc)) from exc

        if response is None or response.return_code == CONTRACT_NOT_FOUND:
            logger.warning(
                "contract_pause_fail_safe",
                reason="contract_not_found",
                address=self.contract_address,
            )
            return True

        if response.return_code != RETURN_CODE_OK:
            logger.warning(
                "contract_pause_fail_safe",
                reason="return_code",
                return_code=response.return_code,
                return_message=response.return_message,
            )
            return True

        return_data = response.return_data
        if not return_data or not return_data[0]:
            is_paused = False
        else:
            is_paused = return_data[0][0] == 1

        self.cache.set(KEY_IS_PAUSED, is_paused)
        return is_paused

    def get_credits_per_egld(self) -> int:
        cached, found = self.cache.get(KEY_CREDITS_PER_EGLD)
        if found:
            logger.debug("contract_cache_hit", key=KEY_CREDITS_PER_EGLD)
            return int(cached)

        response = self._query(CREDITS_PER_EGLD_FUNC)
        credits_per_egld = decode_uint64(_return_data(response))

        self.cache.set(KEY_CREDITS_PER_EGLD, credits_per_egld)
        return credits_per_egld

    def get_credits(self, account_id: int) -> int:
        """Credits of one account. Never cached, the balance changes per call."""
        response = self._query(GET_CREDITS_FUNC, encode_uint64_arg(account_id))
        return decode_uint64(_return_data(response))

    def _query(self, func_name: str, *args: str) -> Optional[VmValuesResponse]:
        request = VmValueRequest(
            address=self.contract_address,
            func_name=func_name,
            # views accept the contract itself as caller
            caller_addr=self.contract_address,
            call_value="0",
            args=tuple(args),
        )
        response = self.data_provider.execute_vm_query(request)
        logger.debug(
            "vm_query_executed",
            func_name=func_name,
            return_code=response.return_code if response is not None else None,
        )
        return response


def _return_data(response: Optional[VmValuesResponse]) -> Sequence[bytes]:
    if response is None:
        return ()
    return response.return_data
