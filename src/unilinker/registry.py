from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from unilinker.errors import UniversityNotFoundError

if TYPE_CHECKING:
    from unilinker.config import ServerConfig


@dataclass(frozen=True)
class University:
    id: str
    name: str
    short_name: str
    location: str


DEFAULT_UNIVERSITIES: tuple[University, ...] = (
    University(
        id="harvard",
        name="Harvard University",
        short_name="Harvard",
        location="Cambridge, Massachusetts, USA",
    ),
    University(
        id="buet",
        name="Bangladesh University of Engineering and Technology",
        short_name="BUET",
        location="Dhaka, Bangladesh",
    ),
    University(
        id="uiu",
        name="United International University",
        short_name="UIU",
        location="Dhaka, Bangladesh",
    ),
)


def normalize_id(university_id: str) -> str:
    return university_id.strip().lower()


class UniversityRegistry:
    """Read-only set of known universities, keyed by lowercase id.

    Built once at startup and shared by every request; there is no write path.
    """

    def __init__(self, universities: Iterable[University]) -> None:
        by_id: dict[str, University] = {}
        for uni in universities:
            key = normalize_id(uni.id)
            if not key:
                raise ValueError("University id must be non-empty")
            if key in by_id:
                raise ValueError(f"Duplicate university id: {key!r}")
            if key != uni.id:
                uni = University(
                    id=key, name=uni.name, short_name=uni.short_name, location=uni.location
                )
            by_id[key] = uni
        self._by_id = MappingProxyType(by_id)

    def lookup(self, university_id: str) -> University | None:
        return self._by_id.get(university_id.lower())

    def get(self, university_id: str) -> University:
        uni = self.lookup(university_id)
        if uni is None:
            raise UniversityNotFoundError(university_id)
        return uni

    def ids(self) -> list[str]:
        return list(self._by_id)

    def items(self) -> Iterator[tuple[str, University]]:
        return iter(self._by_id.items())

    def __contains__(self, university_id: object) -> bool:
        return isinstance(university_id, str) and university_id.lower() in self._by_id

    def __iter__(self) -> Iterator[University]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


def build_registry(config: ServerConfig) -> UniversityRegistry:
    """Seed entries plus configured ones.

    A configured entry replaces a seed entry with the same id; two configured entries
    with the same id are rejected.
    """

    merged: dict[str, University] = {}
    configured: set[str] = set()
    if config.registry.include_defaults:
        for uni in DEFAULT_UNIVERSITIES:
            merged[uni.id] = uni

    for entry in config.registry.universities:
        key = normalize_id(entry.id)
        if key in configured:
            raise ValueError(f"Duplicate university id in config: {key!r}")
        configured.add(key)
        merged[key] = University(
            id=key,
            name=entry.name,
            short_name=entry.short_name,
            location=entry.location,
        )

    return UniversityRegistry(merged.values())
