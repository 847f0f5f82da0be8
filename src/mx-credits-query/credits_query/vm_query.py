import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

RETURN_CODE_OK = "ok"
CONTRACT_NOT_FOUND = "contract not found"


@dataclass(frozen=True)
class VmValueRequest:
    """Read-only call into a contract view function."""

    address: str
    func_name: str
    caller_addr: str
    call_value: str = "0"
    args: Tuple[str, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        return {
            "scAddress": self.address,
            "funcName": self.func_name,
            "caller": self.caller_addr,
            "value": self.call_value,
            "args": list(self.args),
        }


@dataclass(frozen=True)
class VmValuesResponse:
    return_code: str
    return_data: Tuple[bytes, ...] = ()
    return_message: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "VmValuesResponse":
        """Build a response from the proxy's inner data object (base64 return data)."""
        raw_items = payload.get("returnData") or []
        if not isinstance(raw_items, list):
            raise ValueError("returnData must be a list.")

        decoded = []
        for item in raw_items:
            if item is None:
                decoded.append(b"")
                continue
            if not isinstance(item, str):
                raise ValueError("returnData entries must be base64 strings.")
            decoded.append(base64.b64decode(item))

        return cls(
            return_code=str(payload.get("returnCode") or ""),
            return_data=tuple(decoded),
            return_message=str(payload.get("returnMessage") or ""),
        )


class BlockchainDataProvider(Protocol):
    def execute_vm_query(self, request: VmValueRequest) -> Optional[VmValuesResponse]:
        ...
