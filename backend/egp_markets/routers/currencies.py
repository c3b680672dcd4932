from typing import Optional
from fastapi import APIRouter, Depends, Query
from ..errors import failure_guard
from ..models import ConversionResult, ExchangeRates
from ..services.data_providers import DataAdapters
from .params import get_adapters, parse_amount, parse_currency, parse_symbols

router = APIRouter()

@router.get("/rates", response_model=ExchangeRates)
def rates(
    base: str = Query("EGP"),
    symbols: Optional[str] = Query(None, description="Comma separated, e.g. USD,EUR"),
    adapters: DataAdapters = Depends(get_adapters),
):
    syms = parse_symbols(symbols)
    with failure_guard("fetch exchange rates"):
        return adapters.get_rates(parse_currency(base, "EGP"), syms)

@router.get("/convert", response_model=ConversionResult)
def convert(
    amount: str = Query("1"),
    from_: str = Query("EGP", alias="from"),
    to: str = Query("USD"),
    adapters: DataAdapters = Depends(get_adapters),
):
    value = parse_amount(amount)
    src, dst = parse_currency(from_, "EGP"), parse_currency(to, "USD")
    with failure_guard("convert currency"):
        return adapters.convert(value, src, dst)
