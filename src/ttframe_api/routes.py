"""Frame endpoints: SVG card, preview pages, embed descriptor and echo check."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from ttframe.core.config import Settings
from ttframe.core.types import FrameProtocolVariant, PageOptions
from ttframe.ingest.normalizer import normalize
from ttframe.render.embed import build_embed_descriptor
from ttframe.render.image import IMAGE_MEDIA_TYPE, render_image
from ttframe.render.links import diary_deep_link, resolve_app_url, resolve_base_url
from ttframe.render.page import render_preview_page

logger = logging.getLogger(__name__)

router = APIRouter()

IMAGE_METHODS = ["GET", "OPTIONS"]
FRAME_PAGE_METHODS = ["GET", "POST", "OPTIONS"]
GET_ONLY_METHODS = ["GET", "OPTIONS"]
ECHO_METHODS = ["GET", "POST", "OPTIONS"]

IMAGE_PATH = "/api/frame-image"
LEGACY_IMAGE_PATH = "/api/frame/image"


def cors_headers(methods: Sequence[str]) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join(methods),
        "Access-Control-Allow-Headers": "Content-Type",
    }


def preflight_response(methods: Sequence[str]) -> Response:
    """Empty 200 answer to an ``OPTIONS`` preflight."""
    return Response(status_code=200, headers=cors_headers(methods))


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _base_url(request: Request) -> str:
    return resolve_base_url(request.headers.get("host"), _settings(request))


@router.api_route(IMAGE_PATH, methods=IMAGE_METHODS)
@router.api_route(LEGACY_IMAGE_PATH, methods=IMAGE_METHODS)
def frame_image(request: Request) -> Response:
    """Trade card as SVG, cached for an hour by default."""
    if request.method == "OPTIONS":
        return preflight_response(IMAGE_METHODS)

    settings = _settings(request)
    summary = normalize(request.query_params)
    svg = render_image(summary, app_name=settings.app_name)
    logger.info("frame_image_rendered pair=%s pnl=%s", summary.pair, summary.pnl)
    return Response(
        content=svg,
        media_type=IMAGE_MEDIA_TYPE,
        headers={
            **cors_headers(IMAGE_METHODS),
            "Cache-Control": f"public, max-age={settings.image_cache_max_age}",
        },
    )


@router.api_route("/api/frame", methods=FRAME_PAGE_METHODS)
def frame_page(request: Request) -> Response:
    """Embed JSON page that sends browsers on to the diary view."""
    if request.method == "OPTIONS":
        return preflight_response(FRAME_PAGE_METHODS)

    summary = normalize(request.query_params)
    html = render_preview_page(
        summary,
        _base_url(request),
        PageOptions(
            variant=FrameProtocolVariant.EMBED_JSON,
            include_redirect_script=True,
            image_path=IMAGE_PATH,
            page_path="/api/frame",
        ),
        _settings(request),
    )
    logger.info("frame_page_rendered pair=%s method=%s", summary.pair, request.method)
    return HTMLResponse(content=html, headers=cors_headers(FRAME_PAGE_METHODS))


@router.api_route("/api/frame/diary", methods=GET_ONLY_METHODS)
@router.api_route("/frame/diary", methods=GET_ONLY_METHODS)
def diary_page(request: Request) -> Response:
    """Legacy ``fc:frame:*`` page with a full body summary and no redirect."""
    if request.method == "OPTIONS":
        return preflight_response(GET_ONLY_METHODS)

    summary = normalize(request.query_params)
    html = render_preview_page(
        summary,
        _base_url(request),
        PageOptions(
            variant=FrameProtocolVariant.LEGACY_FRAME_TAGS,
            image_path=LEGACY_IMAGE_PATH,
            page_path=request.url.path,
        ),
        _settings(request),
    )
    logger.info("diary_page_rendered pair=%s", summary.pair)
    return HTMLResponse(content=html, headers=cors_headers(GET_ONLY_METHODS))


@router.api_route("/api/index", methods=GET_ONLY_METHODS)
def index(request: Request) -> Response:
    """Frame page when ``frame=true``, otherwise a redirect to the mini app."""
    if request.method == "OPTIONS":
        return preflight_response(GET_ONLY_METHODS)

    settings = _settings(request)
    base_url = _base_url(request)
    app_url = resolve_app_url(base_url, settings)
    if request.query_params.get("frame") != "true":
        logger.info("index_redirected target=%s", app_url)
        return RedirectResponse(
            url=f"{app_url}/", status_code=302, headers=cors_headers(GET_ONLY_METHODS)
        )

    summary = normalize(request.query_params)
    html = render_preview_page(
        summary,
        base_url,
        PageOptions(
            variant=FrameProtocolVariant.LEGACY_FRAME_TAGS,
            image_path=IMAGE_PATH,
            page_path="/api/index",
            button_target_url=diary_deep_link(app_url, summary),
        ),
        settings,
    )
    logger.info("index_rendered pair=%s", summary.pair)
    return HTMLResponse(
        content=html,
        headers={
            **cors_headers(GET_ONLY_METHODS),
            "Cache-Control": f"public, max-age={settings.page_cache_max_age}",
        },
    )


@router.api_route("/api/frame/embed", methods=GET_ONLY_METHODS)
def frame_embed(request: Request) -> Response:
    """Embed descriptor as plain JSON."""
    if request.method == "OPTIONS":
        return preflight_response(GET_ONLY_METHODS)

    summary = normalize(request.query_params)
    descriptor = build_embed_descriptor(summary, _base_url(request), _settings(request))
    logger.info("embed_rendered pair=%s", summary.pair)
    return JSONResponse(content=descriptor.to_payload(), headers=cors_headers(GET_ONLY_METHODS))


@router.api_route("/api/test", methods=ECHO_METHODS)
def echo(request: Request) -> Response:
    if request.method == "OPTIONS":
        return preflight_response(ECHO_METHODS)

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.info("echo method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        content={
            "message": f"Hello from {_settings(request).app_name} API!",
            "method": request.method,
            "path": path,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        headers=cors_headers(ECHO_METHODS),
    )
