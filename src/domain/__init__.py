"""Domain layer: termination notice model and exporter errors."""
