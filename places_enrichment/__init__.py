"""Places enrichment: batch Google Places enrichment of location records."""

__version__ = "1.0.0"
