"""Infrastructure layer: persistence and collector adapters."""
