"""Application layer: use case services and storage adapters."""
