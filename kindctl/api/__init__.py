"""HTTP API exposing configuration validation."""
