"""Check requests against content-filtering rules with the adblock engine."""

__version__ = "0.1.0"
