"""HTTP API for the holiday check service."""
