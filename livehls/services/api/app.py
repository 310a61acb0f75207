from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from livehls.domain.errors import ResolveError
from livehls.services.api.routers import health, streams


def create_app() -> FastAPI:
    app = FastAPI(
        title="livehls",
        version="0.1.0",
    )

    # CORS preflight
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Players and IPTV apps rarely send Origin; every response allows any origin.
    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    @app.exception_handler(ResolveError)
    async def resolve_error_handler(request: Request, exc: ResolveError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=HTTPStatus.NOT_FOUND)

    # Routers
    app.include_router(health.router)
    app.include_router(streams.router)
    return app

app = create_app()
