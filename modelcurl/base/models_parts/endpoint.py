"""
Saved endpoint model.

An endpoint is an OpenAI-compatible base URL plus the credentials and extra
headers sent with every request to it. Endpoints are immutable; editing
one means building a new instance with the same ``id`` and saving it.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

Header = Tuple[str, str]


def new_endpoint_id() -> str:
    """Return an id of the form ``endpoint-<epoch ms>``."""
    return f"endpoint-{int(time.time() * 1000)}"


@dataclass(frozen=True)
class Endpoint:
    """A saved upstream API target.

    Attributes:
        id: Stable identifier used by persistence.
        name: Display name.
        url: Base URL without a trailing slash (``.../v1``).
        api_key: Optional bearer token.
        headers: Extra ``(name, value)`` headers in send order; duplicates
            are kept and all of them are sent.
        model: Default model name for requests to this endpoint.
    """

    id: str
    name: str
    url: str
    api_key: Optional[str] = None
    headers: Tuple[Header, ...] = ()
    model: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        url: str,
        *,
        api_key: Optional[str] = None,
        headers: Iterable[Header] = (),
        model: str = "",
        id: Optional[str] = None,  # noqa: A002 - mirrors the field name
    ) -> "Endpoint":
        """Build an endpoint from user input.

        Strips a trailing ``/`` from ``url``, drops headers with a blank name,
        and turns an empty API key into ``None``.
        """
        cleaned = tuple((str(k), str(v)) for k, v in headers if str(k).strip())
        return cls(
            id=id or new_endpoint_id(),
            name=name,
            url=url.rstrip("/"),
            api_key=api_key or None,
            headers=cleaned,
            model=model,
        )

    def duplicate(self) -> "Endpoint":
        """Return a copy with a fresh id and `` (copy)`` appended to the name."""
        return replace(self, id=new_endpoint_id(), name=f"{self.name} (copy)")

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view; the API key is reported only as present/absent."""
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "has_api_key": self.api_key is not None,
            "headers": [list(h) for h in self.headers],
            "model": self.model,
        }


__all__ = ["Endpoint", "Header", "new_endpoint_id"]
