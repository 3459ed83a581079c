from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .models import GET, RouteEntry, Variant


class RouteNotFound(LookupError):
    """No entry is configured for the requested method and path."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"{method} {path}")
        self.method = method
        self.path = path


class DuplicateRoute(ValueError):
    pass


class UnknownVariant(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown variant {name!r}, expected one of: {', '.join(VARIANTS)}")
        self.name = name


class RouteTable:
    """Immutable lookup from (method, path) to a static response body.

    Paths are matched exactly: no trailing-slash handling, no case folding,
    no wildcards or parameters.
    """

    def __init__(self, entries: Iterable[RouteEntry]) -> None:
        self._entries = tuple(entries)
        lookup: dict[tuple[str, str], str] = {}
        for entry in self._entries:
            key = (entry.method, entry.path)
            if key in lookup:
                raise DuplicateRoute(f"{entry.method} {entry.path} is defined twice")
            lookup[key] = entry.body
        self._lookup = MappingProxyType(lookup)

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        return self._entries

    def paths(self) -> list[str]:
        return [entry.path for entry in self._entries]

    def handle(self, method: str, path: str) -> str:
        try:
            return self._lookup[(method, path)]
        except KeyError:
            raise RouteNotFound(method, path) from None

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({', '.join(self.paths())})"


# === Variants ===


DEV = Variant(
    name="dev",
    version="0.1-SNAPSHOT",
    entries=(
        RouteEntry("/hello", "Hello from Spring Boot - DEV Environment!"),
        RouteEntry("/dev", "Development server active! Version 0.1-SNAPSHOT"),
        RouteEntry("/status", "Dev server is running! Version 0.1-SNAPSHOT"),
    ),
)

STAGING = Variant(
    name="staging",
    version="1.1",
    entries=(
        RouteEntry("/hello", "Hello from Spring Boot - STAGING Environment!"),
        RouteEntry("/status", "Staging server is running! Version 1.1"),
    ),
)

PRODUCTION = Variant(
    name="production",
    version="2.0",
    entries=(
        RouteEntry("/hello", "Hello from Spring Boot - PRODUCTION Environment!"),
        RouteEntry("/health", "Production server is healthy! Version 2.0"),
    ),
)

_BY_NAME: dict[str, Variant] = {v.name: v for v in (DEV, STAGING, PRODUCTION)}

VARIANTS: Mapping[str, RouteTable] = MappingProxyType(
    {name: RouteTable(v.entries) for name, v in _BY_NAME.items()}
)


def get_variant(name: str) -> Variant:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownVariant(name) from None


def route_table(name: str) -> RouteTable:
    table = VARIANTS.get(name)
    if table is None:
        raise UnknownVariant(name)
    return table


__all__ = [
    "GET",
    "DuplicateRoute",
    "RouteNotFound",
    "RouteTable",
    "UnknownVariant",
    "VARIANTS",
    "get_variant",
    "route_table",
]
