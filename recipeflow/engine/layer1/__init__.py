"""Layer 1 — confidence scoring rules."""
