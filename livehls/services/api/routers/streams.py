# livehls/services/api/routers/streams.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from livehls.services.api.deps import get_stream_resolver, playlist_entry, stream_query
from livehls.services.playlist.m3u import render_m3u
from livehls.services.resolver.service import StreamResolver
from livehls.services.schemas.playlist import PlaylistEntry
from livehls.services.schemas.stream import StreamQuery

# Resolver failures (ResolveError) become 404s in the app-level handler.
router = APIRouter(tags=["streams"])

M3U_MEDIA_TYPE = "audio/x-mpegurl; charset=utf-8"
MISSING_URL = "missing ?url"


def _missing_url() -> PlainTextResponse:
    return PlainTextResponse(MISSING_URL, status_code=HTTPStatus.BAD_REQUEST)


@router.get("/hls_url", response_class=PlainTextResponse)
async def hls_url(
    q: StreamQuery = Depends(stream_query),
    resolver: StreamResolver = Depends(get_stream_resolver),
) -> Response:
    if not q.url:
        return _missing_url()
    m3u8 = await resolver.resolve(q.url, q.to_constraint())
    return PlainTextResponse(m3u8 + "\n")


@router.get("/playlist.m3u")
async def playlist(
    q: StreamQuery = Depends(stream_query),
    entry: PlaylistEntry = Depends(playlist_entry),
    resolver: StreamResolver = Depends(get_stream_resolver),
) -> Response:
    if not q.url:
        return _missing_url()
    m3u8 = await resolver.resolve(q.url, q.to_constraint())
    return Response(render_m3u(entry, m3u8), media_type=M3U_MEDIA_TYPE)


@router.get("/redirect.m3u8")
async def redirect(
    q: StreamQuery = Depends(stream_query),
    resolver: StreamResolver = Depends(get_stream_resolver),
) -> Response:
    if not q.url:
        return _missing_url()
    m3u8 = await resolver.resolve(q.url, q.to_constraint())
    return RedirectResponse(m3u8, status_code=HTTPStatus.FOUND)
