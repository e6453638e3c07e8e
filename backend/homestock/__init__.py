"""HomeStock: home inventory and food waste tracking API."""

__version__ = "1.0.0"
