"""Persistence layer: repository contracts and the JSON document backend."""

from .interfaces import IEndpointRepo, IHistoryRepo
from .json_store import EndpointRepoJson, HistoryRepoJson, StoreError, open_store

__all__ = [
    "IEndpointRepo",
    "IHistoryRepo",
    "EndpointRepoJson",
    "HistoryRepoJson",
    "StoreError",
    "open_store",
]
