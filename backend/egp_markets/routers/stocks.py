from typing import Optional
from fastapi import APIRouter, Depends, Query
from ..errors import InvalidInput, failure_guard
from ..models import StockHistory, StocksSummary
from ..services.data_providers import DataAdapters
from .params import get_adapters, parse_horizon

router = APIRouter()

@router.get("/summary", response_model=StocksSummary)
def summary(adapters: DataAdapters = Depends(get_adapters)):
    with failure_guard("fetch stocks summary"):
        return adapters.get_stocks_summary()

@router.get("/history", response_model=StockHistory)
def history(
    symbol: Optional[str] = Query(None, description="EGX ticker, e.g. COMI"),
    range: str = Query("1D"),
    adapters: DataAdapters = Depends(get_adapters),
):
    """Recent price path for one symbol; unknown symbols are a 404."""
    if not symbol or not symbol.strip():
        raise InvalidInput("Symbol parameter is required")
    h = parse_horizon(range)
    with failure_guard("fetch stock history"):
        return adapters.get_stock_history(symbol, h)
