"""Core scoring, gap detection and reference data. No I/O lives here."""
