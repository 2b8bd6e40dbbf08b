"""slotgraph.io: text dump and DataFrame I/O with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # text dump
    "write": ("slotgraph.io.text_io", "write"),
    "read": ("slotgraph.io.text_io", "read"),
    "to_text": ("slotgraph.io.text_io", "to_text"),
    "from_text": ("slotgraph.io.text_io", "from_text"),
    # DataFrame
    "to_dataframes": ("slotgraph.io.dataframe_io", "to_dataframes"),
    "from_dataframes": ("slotgraph.io.dataframe_io", "from_dataframes"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
