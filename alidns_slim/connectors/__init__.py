"""Remote API connectors."""
