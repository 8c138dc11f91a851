"""FastAPI application serving ThunderTrack frame endpoints."""

from __future__ import annotations

import argparse
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from ttframe.core.config import Settings
from ttframe_api.routes import cors_headers, router

API_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


async def _method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer wrong-method requests with ``{"message": ...}`` instead of ``{"detail": ...}``."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)

    allow = (exc.headers or {}).get("Allow", "")
    methods = [method.strip() for method in allow.split(",") if method.strip()]
    logger.info("method_not_allowed method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        content={"message": "Method not allowed"},
        status_code=405,
        headers={"Allow": allow, **cors_headers(methods or ["GET", "OPTIONS"])},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title=f"{settings.app_name} Frames API", version=API_VERSION)
    app.state.settings = settings
    app.add_exception_handler(StarletteHTTPException, _method_not_allowed_handler)
    app.include_router(router)
    return app


app = create_app()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the frame rendering API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3001)
    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    import uvicorn

    uvicorn.run(create_app(settings), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
