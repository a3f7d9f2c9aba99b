"""Domain layer: lineup models, shared result types and optimization services."""
