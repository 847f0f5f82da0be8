from typing import Any, Dict, Optional

import requests
import structlog

from .errors import TransportError
from .vm_query import VmValueRequest, VmValuesResponse

logger = structlog.get_logger()

VM_QUERY_PATH = "/vm-values/query"
SUCCESS_CODE = "successful"


class ProxyClient:
    """Minimal client for the MultiversX proxy VM query endpoint (HTTP POST)."""

    def __init__(
        self,
        proxy_url: str,
        timeout: float = 10,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        url = (proxy_url or "").strip().rstrip("/")
        if not url:
            raise ValueError("proxy_url must be a non-empty string.")

        self.proxy_url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        if headers:
            self.session.headers.update(dict(headers))

    def execute_vm_query(self, request: VmValueRequest) -> Optional[VmValuesResponse]:
        # Single attempt: retry policy belongs to the caller.
        try:
            response = self.session.post(
                self.proxy_url + VM_QUERY_PATH,
                json=request.to_payload(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise TransportError(f"VM query {request.func_name} failed: {exc}") from exc
        except ValueError as exc:
            raise TransportError(f"VM query {request.func_name} returned invalid JSON.") from exc

        return self._parse_envelope(body, request.func_name)

    def close(self) -> None:
        self.session.close()

    def _parse_envelope(self, body: Any, func_name: str) -> Optional[VmValuesResponse]:
        if not isinstance(body, dict):
            raise TransportError("Unexpected proxy response (non-object).")

        error = body.get("error")
        code = body.get("code")
        if error or (code and code != SUCCESS_CODE):
            detail = ": ".join(str(part) for part in (code, error) if part)
            raise TransportError(f"Proxy error for {func_name}: {detail or 'unknown error'}.")

        outer = body.get("data")
        inner = outer.get("data") if isinstance(outer, dict) else None
        if not isinstance(inner, dict):
            logger.debug("vm_query_empty_response", func_name=func_name)
            return None

        try:
            return VmValuesResponse.from_payload(inner)
        except ValueError as exc:
            raise TransportError(f"Malformed VM query result for {func_name}: {exc}") from exc
