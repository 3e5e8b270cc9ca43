"""Order persistence layer: domain aggregates and their repositories."""
