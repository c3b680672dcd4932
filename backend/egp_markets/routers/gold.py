from fastapi import APIRouter, Depends, Query
from ..errors import failure_guard
from ..models import GoldData
from ..services.data_providers import DataAdapters
from .params import get_adapters, parse_base, parse_horizon

router = APIRouter()

@router.get("", response_model=GoldData)
def gold(
    base: str = Query("EGP", description="EGP or USD"),
    range: str = Query("1D", description="1D, 1W, 1M or 1Y"),
    adapters: DataAdapters = Depends(get_adapters),
):
    b, h = parse_base(base), parse_horizon(range)
    with failure_guard("fetch gold data"):
        return adapters.get_gold(b, h)
