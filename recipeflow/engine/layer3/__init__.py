"""Layer 3 — flow ribbon geometry."""
