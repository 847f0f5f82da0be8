import pytest

from credits_query.cache import MemoryCache
from credits_query.config import Config
from credits_query.errors import TransportError
from credits_query.proxy_client import ProxyClient
from credits_query.service import CreditsService
from credits_query.vm_query import VmValuesResponse
from stubs import DataProviderStub, ok_response, raise_error

CONFIG = Config(
    contract_address="erd1contract",
    proxy_url="https://gateway.example.com",
    wallet_url="w",
    explorer_url="e",
    minimum_balance=0.05,
)


def contract_answers(request):
    if request.func_name == "isPaused":
        return ok_response(b"\x01")
    if request.func_name == "getCreditsPerEgld":
        return ok_response(b"\x64")
    if request.func_name == "getCredits":
        return ok_response(int(request.args[0], 16).to_bytes(2, "big"))
    return VmValuesResponse(return_code="function not found")


@pytest.fixture
def provider():
    return DataProviderStub(contract_answers)


@pytest.fixture
def service(provider):
    return CreditsService(CONFIG, data_provider=provider, cache=MemoryCache())


def test_builds_proxy_client_by_default():
    svc = CreditsService(CONFIG)
    try:
        assert isinstance(svc.data_provider, ProxyClient)
        assert svc.data_provider.proxy_url == "https://gateway.example.com"
    finally:
        svc.close()


def test_get_config(service, provider):
    assert service.get_config() == {
        "isContractPaused": True,
        "creditsPerEGLD": 100,
        "walletURL": "w",
        "explorerURL": "e",
        "minimumBalance": 0.05,
    }

    service.get_config()
    assert [req.func_name for req in provider.requests] == ["isPaused", "getCreditsPerEgld"]


def test_is_contract_paused(service):
    assert service.is_contract_paused() == {"contract": "erd1contract", "is_paused": True}


def test_is_contract_paused_reports_transport_failure_as_paused():
    svc = CreditsService(
        CONFIG,
        data_provider=DataProviderStub(raise_error(TransportError("unreachable"))),
        cache=MemoryCache(),
    )

    result = svc.is_contract_paused()

    assert result["is_paused"] is True
    assert "unreachable" in result["error"]


def test_get_config_transport_failure_raises():
    svc = CreditsService(
        CONFIG,
        data_provider=DataProviderStub(raise_error(TransportError("unreachable"))),
        cache=MemoryCache(),
    )

    with pytest.raises(TransportError):
        svc.get_config()


def test_get_credits_per_egld(service):
    assert service.get_credits_per_egld() == {"contract": "erd1contract", "credits_per_egld": 100}


@pytest.mark.parametrize("account_id", [7, "7", " 7 "])
def test_get_credits(service, account_id):
    assert service.get_credits(account_id) == {"contract": "erd1contract", "id": 7, "credits": 7}


@pytest.mark.parametrize("account_id", [-1, "abc", "²", "١٢", 1.5, None, True])
def test_get_credits_rejects_bad_id(service, account_id):
    with pytest.raises(ValueError, match="non-negative integer"):
        service.get_credits(account_id)


def test_is_contract_paused_reports_any_provider_error_as_paused():
    svc = CreditsService(
        CONFIG,
        data_provider=DataProviderStub(raise_error(ConnectionError("reset by peer"))),
        cache=MemoryCache(),
    )

    result = svc.is_contract_paused()

    assert result["is_paused"] is True
    assert "reset by peer" in result["error"]
