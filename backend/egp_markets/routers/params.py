from __future__ import annotations
import math, re
from typing import List, Optional
from fastapi import Request
from ..errors import InvalidInput
from ..models import Horizon
from ..services.data_providers import DataAdapters

BASES = ("EGP", "USD")
AMOUNT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

def get_adapters(request: Request) -> DataAdapters:
    return request.app.state.adapters

def parse_base(value: str) -> str:
    base = (value or "EGP").strip().upper()
    if base not in BASES:
        raise InvalidInput(f"Invalid base parameter: {value!r} (expected one of {', '.join(BASES)})")
    return base

def parse_horizon(value: str) -> Horizon:
    try:
        return Horizon((value or "1D").strip().upper())
    except ValueError:
        raise InvalidInput(f"Invalid range parameter: {value!r} (expected 1D, 1W, 1M or 1Y)") from None

def parse_currency(value: Optional[str], default: str) -> str:
    return (value or "").strip().upper() or default

def parse_amount(value: str) -> float:
    # plain decimal or exponent notation only; no "1_000", "nan" or "inf"
    if not AMOUNT_RE.fullmatch((value or "").strip()):
        raise InvalidInput("Invalid amount parameter")
    amount = float(value)
    if not math.isfinite(amount):
        raise InvalidInput("Invalid amount parameter")
    return amount

def parse_symbols(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    return [x.strip().upper() for x in value.split(",") if x.strip()] or None
