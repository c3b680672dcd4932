from __future__ import annotations
import datetime as dt, math
import pandas as pd
from ..errors import InvalidArgument
from ..models import Horizon, TimeSeriesPoint
from .random_source import RandomSource

INTERVALS = {Horizon.D1: pd.Timedelta(hours=1), Horizon.W1: pd.Timedelta(days=1),
             Horizon.M1: pd.Timedelta(days=1), Horizon.Y1: pd.Timedelta(weeks=1)}
POINTS = {Horizon.D1: 24, Horizon.W1: 7, Horizon.M1: 30, Horizon.Y1: 52}

def utc_now() -> dt.datetime: return dt.datetime.now(dt.timezone.utc)

def iso(ts: dt.datetime) -> str:
    return ts.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def points_for(horizon: Horizon | str) -> int: return POINTS[Horizon(horizon)]

def generate_series(base_price: float, points: int, volatility: float = 0.02, horizon: Horizon | str = Horizon.D1,
                    *, rng: RandomSource, now: dt.datetime | None = None, with_volume: bool = True) -> list[TimeSeriesPoint]:
    """Bounded random walk of `points` samples ending at `now`, one `horizon` interval apart.

    Each step moves the price by a uniform fraction in [-volatility/2, volatility/2) of the
    current price; emitted prices are clamped at zero.
    """
    if not math.isfinite(base_price) or base_price <= 0:
        raise InvalidArgument(f"base_price must be positive, got {base_price!r}")
    if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
        raise InvalidArgument(f"points must be a positive integer, got {points!r}")
    if not math.isfinite(volatility) or volatility < 0:
        raise InvalidArgument(f"volatility must be non-negative, got {volatility!r}")
    stamps = pd.date_range(end=now or utc_now(), periods=points, freq=INTERVALS[Horizon(horizon)])
    price = float(base_price); out = []
    for ts in stamps:
        price += (rng.next_uniform() - 0.5) * volatility * price
        price = max(0.0, price)
        volume = math.floor(rng.next_uniform() * 1_000_000) + 100_000 if with_volume else None
        out.append(TimeSeriesPoint(timestamp=iso(ts.to_pydatetime()), price=price, volume=volume))
    return out
