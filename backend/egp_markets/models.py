"""
Response models for the dashboard API.
Wire format is camelCase (lastUpdated, changePct, ...) so the frontend can keep its types.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BaseCurrency = Literal["EGP", "USD"]
NewsCategory = Literal["EGX", "Currencies", "Gold/Silver", "General"]


class Horizon(str, Enum):
    D1 = "1D"
    W1 = "1W"
    M1 = "1M"
    Y1 = "1Y"


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TimeSeriesPoint(_Model):
    timestamp: str
    price: float = Field(ge=0)
    volume: Optional[int] = Field(default=None, ge=0)


# ---------- Metals ----------
class GoldHeadline(_Model):
    karat: int
    price: float
    change_pct: float
    currency: BaseCurrency


class GoldOther(_Model):
    karat: Union[int, Literal["ounce"]]
    price: float
    change_pct: float
    series_mini: List[TimeSeriesPoint]


class GoldData(_Model):
    headline: GoldHeadline
    series: List[TimeSeriesPoint]
    others: List[GoldOther]
    last_updated: str


class SilverHeadline(_Model):
    unit: Literal["gram", "ounce"]
    price: float
    change_pct: float
    currency: BaseCurrency


class SilverOther(_Model):
    unit: Literal["gram", "ounce"]
    price: float
    change_pct: float
    series_mini: List[TimeSeriesPoint]


class SilverData(_Model):
    headline: SilverHeadline
    series: List[TimeSeriesPoint]
    others: List[SilverOther]
    last_updated: str


# ---------- Stocks ----------
class StockRow(_Model):
    symbol: str
    name: str
    last: float
    change_pct: float
    volume: int
    sparkline: List[TimeSeriesPoint]


class StocksSummary(_Model):
    default_symbol: str
    series: List[TimeSeriesPoint]
    table: List[StockRow]
    last_updated: str


class StockHistory(_Model):
    series: List[TimeSeriesPoint]


# ---------- Currencies ----------
class ExchangeRates(_Model):
    base: str
    rates: Dict[str, float]
    last_updated: str


class ConversionResult(_Model):
    amount: float
    from_: str = Field(alias="from")
    to: str
    result: float
    rate: float
    last_updated: str


# ---------- News ----------
class NewsArticle(_Model):
    id: str
    title: str
    summary: str
    source: str
    category: NewsCategory
    published_at: str
    url: Optional[str] = None
