"""Console currency converter with a static, anchor-based rate table."""

__version__ = "0.1.0"
