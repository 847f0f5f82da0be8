from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol

from .errors import InvalidArgumentError


class ContractHandler(Protocol):
    def is_contract_paused(self) -> bool:
        ...

    def get_credits_per_egld(self) -> int:
        ...

    def get_credits(self, account_id: int) -> int:
        ...


class ConfigHandler:
    """Combine live contract state with static settings into one config snapshot."""

    def __init__(
        self,
        wallet_url: str,
        explorer_url: str,
        contract_handler: Optional[ContractHandler],
        minimum_balance: float,
    ) -> None:
        if contract_handler is None:
            raise InvalidArgumentError("nil contract handler")

        self.wallet_url = wallet_url
        self.explorer_url = explorer_url
        self.contract_handler = contract_handler
        self.minimum_balance = minimum_balance

    def get_config(self) -> Mapping[str, Any]:
        # Any failure aborts the whole snapshot.
        is_paused = self.contract_handler.is_contract_paused()
        credits_per_egld = self.contract_handler.get_credits_per_egld()

        return MappingProxyType(
            {
                "isContractPaused": is_paused,
                "creditsPerEGLD": credits_per_egld,
                "walletURL": self.wallet_url,
                "explorerURL": self.explorer_url,
                "minimumBalance": self.minimum_balance,
            }
        )
