"""HTTP API for the order pipeline."""
