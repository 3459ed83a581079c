from __future__ import annotations

from dataclasses import dataclass


GET = "GET"


@dataclass(frozen=True)
class RouteEntry:
    path: str
    body: str
    method: str = GET


@dataclass(frozen=True)
class Variant:
    name: str
    version: str
    entries: tuple[RouteEntry, ...]
