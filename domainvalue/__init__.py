"""Domain analysis and valuation toolkit."""

__version__ = "0.1.0"
