from __future__ import annotations
import datetime as dt, math
from ..errors import NotFound
from ..models import (ConversionResult, ExchangeRates, GoldData, GoldHeadline, GoldOther, Horizon, NewsArticle,
                      SilverData, SilverHeadline, SilverOther, StockHistory, StockRow, StocksSummary)
from .random_source import RandomSource
from .timeseries import generate_series, iso, points_for, utc_now

# (karat, EGP, USD, changePct, mini-series volatility)
GOLD_OTHERS = [(24, 2335.60, 75.42, 0.54, 0.01), (18, 1550.00, 50.08, 1.10, 0.01), ("ounce", 2000.00, 64.52, 1.70, 0.02)]
GOLD_21K = {"EGP": 1862.35, "USD": 60.12}
SILVER_GRAM = {"EGP": 45.20, "USD": 1.46}
SILVER_OUNCE = {"EGP": 1405.60, "USD": 45.38}
STOCKS = [
    {"symbol": "COMI", "name": "Commercial International Bank", "base_price": 85.50},
    {"symbol": "FWRY", "name": "Fawry for Banking Technology", "base_price": 12.30},
    {"symbol": "SWDY", "name": "El Sewedy Electric Company", "base_price": 28.75},
    {"symbol": "EGTS", "name": "Egyptian Transport Services", "base_price": 15.60},
    {"symbol": "ABUK", "name": "Abu Kir Fertilizers Company", "base_price": 42.20},
]
RATES = {
    "EGP": {"USD": 0.0203, "EUR": 0.0186, "GBP": 0.0159, "SAR": 0.0761},
    "USD": {"EGP": 49.30, "EUR": 0.92, "GBP": 0.78, "SAR": 3.75},
}
NEWS = [
    ("1", "Egyptian Stock Exchange Reaches New Heights",
     "The EGX30 index closed at record levels driven by strong banking sector performance...", "Egypt Today", "EGX", 2),
    ("2", "Gold Prices Surge Amid Global Uncertainty",
     "International gold prices continue their upward trajectory as investors seek safe haven assets...",
     "Financial Times Egypt", "Gold/Silver", 4),
    ("3", "Egyptian Pound Strengthens Against Dollar",
     "The EGP showed resilience in recent trading sessions, gaining ground against major currencies...",
     "Al Ahram Economics", "Currencies", 6),
    ("4", "Central Bank Announces New Monetary Policy",
     "The Central Bank of Egypt unveiled new measures to support economic growth and stability...",
     "Reuters Egypt", "General", 8),
]
MINI_POINTS = 10

def build_gold(base: str = "EGP", horizon: Horizon | str = Horizon.D1, *, rng: RandomSource, now: dt.datetime | None = None) -> GoldData:
    now = now or utc_now(); col = 1 if base == "EGP" else 2; price = GOLD_21K[base]
    others = [GoldOther(karat=row[0], price=row[col], change_pct=row[3],
                        series_mini=generate_series(row[col], MINI_POINTS, row[4], rng=rng, now=now)) for row in GOLD_OTHERS]
    return GoldData(headline=GoldHeadline(karat=21, price=price, change_pct=1.25, currency=base),
                    series=generate_series(price, points_for(horizon), 0.015, horizon, rng=rng, now=now),
                    others=others, last_updated=iso(now))

def build_silver(base: str = "EGP", horizon: Horizon | str = Horizon.D1, *, rng: RandomSource, now: dt.datetime | None = None) -> SilverData:
    now = now or utc_now(); price = SILVER_GRAM[base]; ounce = SILVER_OUNCE[base]
    return SilverData(headline=SilverHeadline(unit="gram", price=price, change_pct=0.85, currency=base),
                      series=generate_series(price, points_for(horizon), 0.02, horizon, rng=rng, now=now),
                      others=[SilverOther(unit="ounce", price=ounce, change_pct=0.85,
                                          series_mini=generate_series(ounce, MINI_POINTS, 0.02, rng=rng, now=now))],
                      last_updated=iso(now))

def build_stocks_summary(*, rng: RandomSource, now: dt.datetime | None = None) -> StocksSummary:
    now = now or utc_now(); table = []
    for s in STOCKS:
        change_pct = (rng.next_uniform() - 0.5) * 6  # -3% .. +3%
        table.append(StockRow(symbol=s["symbol"], name=s["name"], last=s["base_price"] * (1 + change_pct / 100),
                              change_pct=change_pct, volume=math.floor(rng.next_uniform() * 5_000_000) + 100_000,
                              # sparkline walks from the base price, not from `last`
                              sparkline=generate_series(s["base_price"], MINI_POINTS, 0.02, rng=rng, now=now)))
    return StocksSummary(default_symbol="COMI", series=generate_series(STOCKS[0]["base_price"], 24, 0.025, rng=rng, now=now),
                         table=table, last_updated=iso(now))

def build_stock_history(symbol: str, horizon: Horizon | str = Horizon.D1, *, rng: RandomSource, now: dt.datetime | None = None) -> StockHistory:
    """Sparkline of `symbol` cut to the horizon's point count (at most the 10 stored points)."""
    wanted = (symbol or "").strip().upper()
    summary = build_stocks_summary(rng=rng, now=now)
    row = next((r for r in summary.table if r.symbol == wanted), None)
    if row is None: raise NotFound(f"Stock {symbol} not found")
    return StockHistory(series=row.sparkline[:points_for(horizon)])

def build_exchange_rates(base: str = "EGP", *, now: dt.datetime | None = None) -> ExchangeRates:
    return ExchangeRates(base=base, rates=dict(RATES.get(base, {})), last_updated=iso(now or utc_now()))

def build_conversion(amount: float, from_: str, to: str, *, now: dt.datetime | None = None) -> ConversionResult:
    now = now or utc_now()
    rate = build_exchange_rates(from_, now=now).rates.get(to) or 1.0  # unknown pair converts 1:1
    return ConversionResult(amount=amount, from_=from_, to=to, result=amount * rate, rate=rate, last_updated=iso(now))

def build_news(*, now: dt.datetime | None = None) -> list[NewsArticle]:
    now = now or utc_now()
    return [NewsArticle(id=i, title=title, summary=summary, source=source, category=category,
                        published_at=iso(now - dt.timedelta(hours=hours)), url=f"https://example.com/news/{i}")
            for i, title, summary, source, category, hours in NEWS]
