"""Infrastructure layer: filesystem access, analyzers, writers and logging."""
