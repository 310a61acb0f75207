# livehls/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from livehls.common.settings import get_settings

router = APIRouter(tags=["health"])

@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "OK\n"

@router.get("/healthz")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
    }
