"""Host context adapters."""
