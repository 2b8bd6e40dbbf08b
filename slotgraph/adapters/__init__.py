"""slotgraph.adapters: conversions to and from other graph libraries.

Adapters import their backend on load; import the adapter module directly.
"""
