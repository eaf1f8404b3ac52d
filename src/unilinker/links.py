"""Deep link and web link construction.

The two templates below are the only place the link formats are spelled out. Server
code formats them here; the generator page embeds them unchanged and substitutes the
placeholders in the browser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from unilinker.registry import University, UniversityRegistry

DEEP_LINK_SCHEME: Final[str] = "unilinker"
DEEP_LINK_TEMPLATE: Final[str] = DEEP_LINK_SCHEME + "://university/{id}"
WEB_LINK_TEMPLATE: Final[str] = "{origin}/uni/{id}"

# Browser localStorage keys written by the landing page for the installed app to pick up.
DEFERRED_LINK_KEY: Final[str] = "unilinker_deferred_link"
DEFERRED_UNIVERSITY_KEY: Final[str] = "unilinker_deferred_university"


@dataclass(frozen=True)
class DeepLinkResult:
    university: University
    deep_link: str
    web_link: str


def build_deep_link(university_id: str) -> str:
    return DEEP_LINK_TEMPLATE.format(id=university_id.lower())


def build_web_link(university_id: str, *, host: str, scheme: str) -> str:
    return WEB_LINK_TEMPLATE.format(origin=f"{scheme}://{host}", id=university_id.lower())


def resolve(
    registry: UniversityRegistry, university_id: str, *, host: str, scheme: str
) -> DeepLinkResult:
    """Resolve an id to its university and links; raises UniversityNotFoundError."""

    key = university_id.lower()
    university = registry.get(key)
    return DeepLinkResult(
        university=university,
        deep_link=build_deep_link(key),
        web_link=build_web_link(key, host=host, scheme=scheme),
    )
