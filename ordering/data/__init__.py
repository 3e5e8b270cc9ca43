"""Data layer - SQLAlchemy models, mappers and repository implementations."""

from .uow import UnitOfWork, create_uow

__all__ = ["UnitOfWork", "create_uow"]
