"""Domain layer: catalog model, ports, and the synchronization use case."""
