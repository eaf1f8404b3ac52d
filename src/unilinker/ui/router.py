from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from unilinker.config import ServerConfig
from unilinker.deps import get_config, get_registry, request_origin
from unilinker.links import (
    DEEP_LINK_TEMPLATE,
    DEFERRED_LINK_KEY,
    DEFERRED_UNIVERSITY_KEY,
    WEB_LINK_TEMPLATE,
    build_deep_link,
    resolve,
)
from unilinker.registry import UniversityRegistry

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["ui"])

logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
async def generator_page(
    request: Request,
    registry: UniversityRegistry = Depends(get_registry),  # noqa: B008
) -> HTMLResponse:
    universities = list(registry)
    sample = build_deep_link(universities[0].id) if universities else None
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": "UniLinker Deep Link Generator",
            "universities": universities,
            "deep_link_template": DEEP_LINK_TEMPLATE,
            "web_link_template": WEB_LINK_TEMPLATE,
            "sample_deep_link": sample,
        },
    )


@router.get("/uni/{university_id}", response_class=HTMLResponse)
async def landing_page(
    request: Request,
    university_id: str,
    registry: UniversityRegistry = Depends(get_registry),  # noqa: B008
    config: ServerConfig = Depends(get_config),  # noqa: B008
) -> HTMLResponse:
    scheme, host = request_origin(request)
    result = resolve(registry, university_id, host=host, scheme=scheme)
    logger.info("Landing %s -> %s", result.university.id, result.deep_link)

    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "title": f"Opening {result.university.name} in UniLinker...",
            "university": result.university,
            "deep_link": result.deep_link,
            "web_link": result.web_link,
            "fallback_timeout_ms": config.landing.fallback_timeout_ms,
            "deferred_link_key": DEFERRED_LINK_KEY,
            "deferred_university_key": DEFERRED_UNIVERSITY_KEY,
        },
    )


@router.get("/download-apk", response_class=HTMLResponse)
async def download_apk_page(request: Request) -> HTMLResponse:
    scheme, host = request_origin(request)
    return templates.TemplateResponse(
        request,
        "download_apk.html",
        {
            "title": "Install UniLinker",
            "origin": f"{scheme}://{host}",
        },
    )


def render_not_found(request: Request, message: str = "University not found") -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": "Not found • UniLinker", "message": message},
        status_code=404,
    )
