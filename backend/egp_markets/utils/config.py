from __future__ import annotations
import os
from dataclasses import dataclass, field
from dotenv import find_dotenv, load_dotenv

DATA_SOURCES = ("mock", "live")
DEFAULT_ORIGINS = ("http://localhost:3000", "http://127.0.0.1:3000")

@dataclass(frozen=True)
class Settings:
    data_source: str = "mock"
    rates_api_base: str = "https://api.exchangerate.host"
    rates_api_timeout: float = 10.0
    mock_latency_ms: int = 0
    random_seed: int | None = None
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ORIGINS)
    log_level: str = "INFO"

    def __post_init__(self):
        if self.data_source not in DATA_SOURCES:
            raise ValueError(f"DATA_SOURCE must be one of {DATA_SOURCES}, got {self.data_source!r}")

    @property
    def use_mock(self) -> bool: return self.data_source == "mock"

def _data_source() -> str:
    explicit = os.getenv("DATA_SOURCE", "").strip().lower()
    if explicit: return explicit
    # legacy switch kept for existing .env files
    return "live" if os.getenv("USE_MOCK", "true").strip().lower() == "false" else "mock"

def load_settings() -> Settings:
    """Resolve settings from the environment (and .env) once at process start."""
    load_dotenv(find_dotenv(usecwd=True))
    seed = os.getenv("RANDOM_SEED", "").strip()
    origins = os.getenv("ALLOWED_ORIGINS", "")
    return Settings(
        data_source=_data_source(),
        rates_api_base=os.getenv("RATES_API_BASE", "https://api.exchangerate.host").rstrip("/"),
        rates_api_timeout=float(os.getenv("RATES_API_TIMEOUT", "10")),
        mock_latency_ms=int(os.getenv("MOCK_LATENCY_MS", "0")),
        random_seed=int(seed) if seed else None,
        allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or DEFAULT_ORIGINS,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
