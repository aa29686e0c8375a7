"""
Request description shared by the sync and async resources.

Each operation is expressed once as a function returning an ``APICall``; the sync
and async resource classes only differ in how they send it.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

PARTIAL_SUCCESS = 207


@dataclass(frozen=True, slots=True)
class APICall:
    method: str
    path: str
    params: Mapping[str, Any] | None = None
    json_data: Any = None
    headers: Mapping[str, str] | None = None
    ok_statuses: tuple[int, ...] = (200,)

    def as_kwargs(self) -> dict[str, Any]:
        return {
            "params": self.params,
            "json_data": self.json_data,
            "headers": self.headers,
            "ok_statuses": self.ok_statuses,
        }


def bool_to_str(value: bool) -> str:
    return "true" if value else "false"
