"""
tqcal.engines.factory
---------------------
Transforms pure data specifications into live engine objects.
"""

from __future__ import annotations

from functools import lru_cache

from .specs import ALL_SPECS, DEFAULT_SPEC, TranquilitySpec
from .tranquility import TranquilityEngine


def make_engine(spec: TranquilitySpec = DEFAULT_SPEC) -> TranquilityEngine:
    """The universal entry point."""
    return TranquilityEngine(spec)

@lru_cache(maxsize=None)
def get_engine(name: str = DEFAULT_SPEC.name) -> TranquilityEngine:
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'. Available: {sorted(ALL_SPECS)}")
    return make_engine(ALL_SPECS[name])
