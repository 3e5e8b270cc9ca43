"""Domain errors."""
from typing import Optional


class NotFoundError(Exception):
    """Raised when a repository cannot fetch the requested aggregate."""

    def __init__(self, entity: str, entity_id: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
