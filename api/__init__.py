"""HTTP API serving dashboard page payloads."""
