"""Data sources and sinks, string helpers, DSV and XML streams, and OpenStreetMap and bus-system models."""

__version__ = "0.1.0"