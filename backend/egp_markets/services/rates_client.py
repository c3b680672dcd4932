"""
HTTP client for the live FX provider (exchangerate.host-style API).

Calls never raise: transport errors, bad status codes and malformed payloads all
come back as Err(UpstreamError) so the caller decides how to degrade.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar, Union

import httpx

from ..errors import UpstreamError
from ..models import ConversionResult, ExchangeRates

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: UpstreamError


Result = Union[Ok[T], Err]


class ExchangeRateClient:
    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def _get(self, path: str, params: dict) -> Result[dict]:
        try:
            r = self._client.get(f"{self.base_url}{path}", params=params)
            r.raise_for_status()
            payload = r.json()
        except (httpx.HTTPError, ValueError) as e:
            return Err(UpstreamError(f"{path} failed: {type(e).__name__}: {e}"))
        if not isinstance(payload, dict):
            return Err(UpstreamError(f"{path} returned a non-object payload"))
        return Ok(payload)

    def latest(self, base: str, symbols: Optional[Sequence[str]] = None) -> Result[ExchangeRates]:
        params = {"base": base}
        if symbols:
            params["symbols"] = ",".join(symbols)
        res = self._get("/latest", params)
        if isinstance(res, Err):
            return res
        j = res.value
        try:
            return Ok(ExchangeRates(base=j.get("base") or base, rates=j["rates"], last_updated=str(j["date"])))
        except (KeyError, TypeError, ValueError) as e:
            return Err(UpstreamError(f"/latest payload malformed: {e}"))

    def convert(self, amount: float, from_: str, to: str) -> Result[ConversionResult]:
        res = self._get("/convert", {"from": from_, "to": to, "amount": amount})
        if isinstance(res, Err):
            return res
        j = res.value
        try:
            return Ok(ConversionResult(amount=amount, from_=from_, to=to, result=float(j["result"]),
                                       rate=float(j["info"]["rate"]), last_updated=str(j["date"])))
        except (KeyError, TypeError, ValueError) as e:
            return Err(UpstreamError(f"/convert payload malformed: {e}"))
