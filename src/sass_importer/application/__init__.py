"""Application layer — pipeline steps and use cases."""
