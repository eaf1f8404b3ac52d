from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from unilinker.api.models import ApiError, GeneratedLink, UniversityOut
from unilinker.deps import get_registry, request_origin
from unilinker.links import resolve
from unilinker.registry import UniversityRegistry

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/universities", response_model=dict[str, UniversityOut])
async def list_universities(
    registry: UniversityRegistry = Depends(get_registry),  # noqa: B008
) -> dict[str, UniversityOut]:
    return {uni_id: UniversityOut.from_university(uni) for uni_id, uni in registry.items()}


@router.get(
    "/generate-link/{university_id}",
    response_model=GeneratedLink,
    responses={404: {"model": ApiError}},
)
async def generate_link(
    university_id: str,
    request: Request,
    registry: UniversityRegistry = Depends(get_registry),  # noqa: B008
) -> GeneratedLink:
    scheme, host = request_origin(request)
    # UniversityNotFoundError is turned into a 404 by the app-level handler.
    result = resolve(registry, university_id, host=host, scheme=scheme)
    return GeneratedLink.from_result(result)
