from __future__ import annotations
import logging, time
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from ..models import ConversionResult, ExchangeRates, GoldData, Horizon, NewsArticle, SilverData, StockHistory, StocksSummary
from ..utils.config import Settings
from . import mock_data
from .random_source import NumpyRandomSource, RandomSource
from .rates_client import Err, ExchangeRateClient

logger = logging.getLogger(__name__)

class DataAdapters(ABC):
    @abstractmethod
    def get_gold(self, base: str = "EGP", horizon: Horizon = Horizon.D1) -> GoldData: ...
    @abstractmethod
    def get_silver(self, base: str = "EGP", horizon: Horizon = Horizon.D1) -> SilverData: ...
    @abstractmethod
    def get_stocks_summary(self) -> StocksSummary: ...
    @abstractmethod
    def get_stock_history(self, symbol: str, horizon: Horizon = Horizon.D1) -> StockHistory: ...
    @abstractmethod
    def get_rates(self, base: str = "EGP", symbols: Optional[Sequence[str]] = None) -> ExchangeRates: ...
    @abstractmethod
    def convert(self, amount: float, from_: str, to: str) -> ConversionResult: ...
    @abstractmethod
    def get_news(self) -> list[NewsArticle]: ...
    def close(self) -> None:
        """Release provider resources; synthetic adapters hold none."""

class MockDataAdapters(DataAdapters):
    """Synthetic data for every endpoint. `latency_ms` imitates a remote provider for UI work."""
    def __init__(self, rng: RandomSource, latency_ms: int = 0):
        self.rng = rng; self.latency_ms = latency_ms
    def _delay(self, name: str):
        logger.debug("mock adapter: %s", name)
        if self.latency_ms > 0: time.sleep(self.latency_ms / 1000)
    def get_gold(self, base="EGP", horizon=Horizon.D1):
        self._delay("gold"); return mock_data.build_gold(base, horizon, rng=self.rng)
    def get_silver(self, base="EGP", horizon=Horizon.D1):
        self._delay("silver"); return mock_data.build_silver(base, horizon, rng=self.rng)
    def get_stocks_summary(self):
        self._delay("stocks_summary"); return mock_data.build_stocks_summary(rng=self.rng)
    def get_stock_history(self, symbol, horizon=Horizon.D1):
        self._delay("stock_history"); return mock_data.build_stock_history(symbol, horizon, rng=self.rng)
    def get_rates(self, base="EGP", symbols=None):
        # symbols filter is only honoured by the live provider
        self._delay("rates"); return mock_data.build_exchange_rates(base)
    def convert(self, amount, from_, to):
        self._delay("convert"); return mock_data.build_conversion(amount, from_, to)
    def get_news(self):
        self._delay("news"); return mock_data.build_news()

class LiveDataAdapters(MockDataAdapters):
    """Live FX rates and conversion; metals, stocks and news stay synthetic until a provider exists."""
    def __init__(self, client: ExchangeRateClient, rng: RandomSource):
        super().__init__(rng); self.client = client
    def close(self):
        self.client.close()
    def get_rates(self, base="EGP", symbols=None):
        res = self.client.latest(base, symbols)
        if isinstance(res, Err):
            logger.warning("live rates unavailable, serving synthetic rates for %s: %s", base, res.error)
            return mock_data.build_exchange_rates(base)
        return res.value
    def convert(self, amount, from_, to):
        res = self.client.convert(amount, from_, to)
        if isinstance(res, Err):
            logger.warning("live conversion unavailable, serving synthetic %s->%s: %s", from_, to, res.error)
            return mock_data.build_conversion(amount, from_, to)
        return res.value

def build_adapters(settings: Settings) -> DataAdapters:
    rng = NumpyRandomSource(settings.random_seed)
    if settings.use_mock:
        logger.info("data source: mock (latency %sms, seed %s)", settings.mock_latency_ms, settings.random_seed)
        return MockDataAdapters(rng, settings.mock_latency_ms)
    logger.info("data source: live (rates from %s)", settings.rates_api_base)
    return LiveDataAdapters(ExchangeRateClient(settings.rates_api_base, settings.rates_api_timeout), rng)
