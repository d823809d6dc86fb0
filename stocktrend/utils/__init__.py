"""Data-source client, its exceptions, and price-series validation."""
