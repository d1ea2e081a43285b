"""Domain ports — contracts implemented by infrastructure adapters."""
