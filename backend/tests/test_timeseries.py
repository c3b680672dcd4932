import datetime as dt

import pytest

from conftest import FixedRandom
from egp_markets.errors import InvalidArgument
from egp_markets.models import Horizon
from egp_markets.services.random_source import NumpyRandomSource
from egp_markets.services.timeseries import generate_series, iso, points_for


def _parse(ts: str) -> dt.datetime:
    return dt.datetime.fromisoformat(ts.replace("Z", "+00:00"))


class TestGenerateSeries:
    @pytest.mark.parametrize("horizon,points", [("1D", 24), ("1W", 7), ("1M", 30), ("1Y", 52), ("1D", 1)])
    def test_length_and_increasing_timestamps(self, rng, now, horizon, points):
        series = generate_series(100.0, points, 0.02, horizon, rng=rng, now=now)

        assert len(series) == points
        stamps = [_parse(p.timestamp) for p in series]
        assert all(a < b for a, b in zip(stamps, stamps[1:]))
        assert series[-1].timestamp == iso(now)

    @pytest.mark.parametrize("horizon,step", [
        (Horizon.D1, dt.timedelta(hours=1)),
        (Horizon.W1, dt.timedelta(days=1)),
        (Horizon.M1, dt.timedelta(days=1)),
        (Horizon.Y1, dt.timedelta(weeks=1)),
    ])
    def test_interval_follows_horizon(self, rng, now, horizon, step):
        series = generate_series(50.0, 3, 0.01, horizon, rng=rng, now=now)

        assert _parse(series[1].timestamp) - _parse(series[0].timestamp) == step
        assert _parse(series[0].timestamp) == now - 2 * step

    def test_prices_never_negative_even_with_wild_volatility(self, now):
        series = generate_series(10.0, 200, 3.0, rng=NumpyRandomSource(3), now=now)

        assert all(p.price >= 0 for p in series)

    def test_volume_range(self, rng, now):
        series = generate_series(10.0, 100, 0.02, rng=rng, now=now)

        assert all(100_000 <= p.volume < 1_100_000 for p in series)

    def test_volume_can_be_omitted(self, rng, now):
        series = generate_series(10.0, 5, 0.02, rng=rng, now=now, with_volume=False)

        assert all(p.volume is None for p in series)

    def test_walk_step_from_known_draws(self, now):
        series = generate_series(100.0, 2, 0.02, rng=FixedRandom(0.75), now=now)

        assert series[0].price == pytest.approx(100.5)
        assert series[1].price == pytest.approx(100.5 * 1.005)
        assert series[0].volume == 850_000

    def test_seeded_source_is_reproducible(self, now):
        a = generate_series(1862.35, 24, 0.015, "1D", rng=NumpyRandomSource(42), now=now)
        b = generate_series(1862.35, 24, 0.015, "1D", rng=NumpyRandomSource(42), now=now)

        assert a == b
        assert [p.model_dump() for p in a] == [p.model_dump() for p in b]

    def test_unseeded_sources_differ(self, now):
        a = generate_series(100.0, 24, 0.02, rng=NumpyRandomSource(), now=now)
        b = generate_series(100.0, 24, 0.02, rng=NumpyRandomSource(), now=now)

        assert [p.price for p in a] != [p.price for p in b]

    @pytest.mark.parametrize("base,points", [(0, 10), (-5.0, 10), (float("nan"), 10), (10.0, 0), (10.0, -1), (10.0, 2.5)])
    def test_rejects_bad_arguments(self, rng, base, points):
        with pytest.raises(InvalidArgument):
            generate_series(base, points, rng=rng)

    def test_rejects_negative_volatility(self, rng):
        with pytest.raises(ValueError):
            generate_series(10.0, 5, -0.1, rng=rng)


def test_points_for_horizon():
    assert [points_for(h) for h in ("1D", "1W", "1M", "1Y")] == [24, 7, 30, 52]
