"""Domain layer — models, ports and services with no infrastructure imports."""
