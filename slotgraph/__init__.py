# slotgraph/__init__.py
"""slotgraph: single import, full API."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "slotgraph.adapters",
    "io": "slotgraph.io",
    "core": "slotgraph.core",
    "algorithms": "slotgraph.algorithms",
    # direct convenience
    "networkx": "slotgraph.adapters.networkx_adapter",
    "textio": "slotgraph.io.text_io",
    "dataframe": "slotgraph.io.dataframe_io",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "SlotGraph": ("slotgraph.core.graph", "SlotGraph"),
    # Errors
    "GraphError": ("slotgraph.core._errors", "GraphError"),
    "VertexNotFoundError": ("slotgraph.core._errors", "VertexNotFoundError"),
    "SelfLoopError": ("slotgraph.core._errors", "SelfLoopError"),
    "GraphFormatError": ("slotgraph.core._errors", "GraphFormatError"),
    # Text dump
    "read": ("slotgraph.io.text_io", "read"),
    "write": ("slotgraph.io.text_io", "write"),
    "to_text": ("slotgraph.io.text_io", "to_text"),
    "from_text": ("slotgraph.io.text_io", "from_text"),
    # DataFrames (Polars out, any narwhals backend in)
    "to_dataframes": ("slotgraph.io.dataframe_io", "to_dataframes"),
    "from_dataframes": ("slotgraph.io.dataframe_io", "from_dataframes"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("slotgraph.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("slotgraph.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


# Version: prefer internal, then fall back to distribution metadata
try:
    from ._version import __version__  # type: ignore
except ImportError:
    try:
        __version__ = _pkg_version("slotgraph")
    except PackageNotFoundError:
        __version__ = "0.0.0"
