"""Services package for remote lookups."""

from .model_service import ModelService

__all__ = [
    "ModelService",
]
