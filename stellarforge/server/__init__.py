"""HTTP server for Stellar Forge."""
