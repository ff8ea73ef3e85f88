"""Layer 2 — link selection."""
