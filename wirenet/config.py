"""Configuration helpers for wire net processing."""

from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator


@dataclass
class WireNetConfig:
    """Tunable knobs shared by the graph and reconciliation stages."""

    grid_size: float = 1.0
    # decimals kept when quantizing positions into node keys
    key_decimals: int = 5
    keep_empty_wires: bool = False


_WIRENET_CONFIG = WireNetConfig()


def get_config() -> WireNetConfig:
    return copy.deepcopy(_WIRENET_CONFIG)


def set_config(config: WireNetConfig) -> None:
    global _WIRENET_CONFIG
    if config.grid_size <= 0.0:
        raise ValueError("grid_size must be positive")
    if config.key_decimals < 0:
        raise ValueError("key_decimals must be non-negative")
    _WIRENET_CONFIG = copy.deepcopy(config)


@contextmanager
def configured(**overrides: Any) -> Iterator[WireNetConfig]:
    """Temporarily override configuration fields inside a ``with`` block."""

    previous = get_config()
    set_config(replace(previous, **overrides))
    try:
        yield get_config()
    finally:
        set_config(previous)
