import httpx
import pytest

from egp_markets.services.rates_client import Err, ExchangeRateClient, Ok


def _client(handler) -> ExchangeRateClient:
    return ExchangeRateClient("https://fx.test/", timeout=2, transport=httpx.MockTransport(handler))


class TestLatest:
    def test_ok(self):
        seen = {}

        def handler(request: httpx.Request):
            seen["url"] = request.url
            return httpx.Response(200, json={"base": "EGP", "rates": {"USD": 0.021, "EUR": 0.019}, "date": "2026-10-19"})

        res = _client(handler).latest("EGP", ["USD", "EUR"])

        assert isinstance(res, Ok)
        assert res.value.rates == {"USD": 0.021, "EUR": 0.019}
        assert res.value.last_updated == "2026-10-19"
        assert seen["url"].path == "/latest"
        assert seen["url"].params["base"] == "EGP"
        assert seen["url"].params["symbols"] == "USD,EUR"

    def test_no_symbols_param_when_unfiltered(self):
        def handler(request):
            assert "symbols" not in request.url.params
            return httpx.Response(200, json={"base": "USD", "rates": {}, "date": "2026-10-19"})

        assert isinstance(_client(handler).latest("USD"), Ok)

    def test_http_error_is_err(self):
        res = _client(lambda request: httpx.Response(503)).latest("EGP")

        assert isinstance(res, Err)
        assert "/latest" in str(res.error)

    def test_transport_error_is_err(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert isinstance(_client(handler).latest("EGP"), Err)

    @pytest.mark.parametrize("body", [{"base": "EGP", "date": "x"}, {"rates": "nope", "date": "x"}, [1, 2]])
    def test_malformed_payload_is_err(self, body):
        assert isinstance(_client(lambda request: httpx.Response(200, json=body)).latest("EGP"), Err)

    def test_non_json_is_err(self):
        assert isinstance(_client(lambda request: httpx.Response(200, text="<html>")).latest("EGP"), Err)


class TestConvert:
    def test_ok(self):
        def handler(request):
            assert request.url.path == "/convert"
            assert request.url.params["from"] == "EGP"
            assert request.url.params["to"] == "USD"
            return httpx.Response(200, json={"result": 2.1, "info": {"rate": 0.021}, "date": "2026-10-19"})

        res = _client(handler).convert(100.0, "EGP", "USD")

        assert isinstance(res, Ok)
        assert res.value.result == 2.1
        assert res.value.rate == 0.021
        assert res.value.amount == 100.0

    def test_missing_info_is_err(self):
        res = _client(lambda request: httpx.Response(200, json={"result": 2.1, "date": "x"})).convert(1, "EGP", "USD")

        assert isinstance(res, Err)
