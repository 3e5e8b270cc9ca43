"""Infrastructure layer - database wiring, logging and test doubles."""
