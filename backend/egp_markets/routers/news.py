from typing import List
from fastapi import APIRouter, Depends
from ..errors import failure_guard
from ..models import NewsArticle
from ..services.data_providers import DataAdapters
from .params import get_adapters

router = APIRouter()

@router.get("", response_model=List[NewsArticle])
def news(adapters: DataAdapters = Depends(get_adapters)):
    with failure_guard("fetch news"):
        return adapters.get_news()
