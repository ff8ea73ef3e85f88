"""Layer 0 — text normalization."""
