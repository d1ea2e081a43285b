"""External compiler adapters."""
