"""Contest client for the ICFP 2020 alien API."""

__version__ = "1.0.0"
