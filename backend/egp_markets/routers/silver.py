from fastapi import APIRouter, Depends, Query
from ..errors import failure_guard
from ..models import SilverData
from ..services.data_providers import DataAdapters
from .params import get_adapters, parse_base, parse_horizon

router = APIRouter()

@router.get("", response_model=SilverData)
def silver(
    base: str = Query("EGP", description="EGP or USD"),
    range: str = Query("1D", description="1D, 1W, 1M or 1Y"),
    adapters: DataAdapters = Depends(get_adapters),
):
    b, h = parse_base(base), parse_horizon(range)
    with failure_guard("fetch silver data"):
        return adapters.get_silver(b, h)
