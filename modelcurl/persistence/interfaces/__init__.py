"""Persistence interface contracts."""

from .repos import IEndpointRepo, IHistoryRepo

__all__ = ["IEndpointRepo", "IHistoryRepo"]
