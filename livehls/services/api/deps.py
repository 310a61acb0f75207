# livehls/services/api/deps.py
from __future__ import annotations
from typing import Optional
from fastapi import Depends, Query

from livehls.common.strings.parsers import parse_int_or_none, trimmed
from livehls.domain.ports.probe import StreamProbePort
from livehls.services.probe.ytdlp_adapter import YtDlpAdapter
from livehls.services.resolver.service import StreamResolver
from livehls.services.schemas.playlist import DEFAULT_GROUP, DEFAULT_NAME, PlaylistEntry
from livehls.services.schemas.stream import StreamQuery

def get_stream_probe() -> StreamProbePort:
    """
    Provide a StreamProbePort implementation (yt-dlp) via DI.
    Tests override this with a canned probe.
    """
    return YtDlpAdapter()

def get_stream_resolver(probe: StreamProbePort = Depends(get_stream_probe)) -> StreamResolver:
    return StreamResolver(probe)

def stream_query(
    url: Optional[str] = Query(None, description="Source page, e.g. a channel /live URL"),
    h: Optional[str] = Query(None, description="Target height; best at or under it wins"),
    min_: Optional[str] = Query(None, alias="min", description="Minimum height"),
) -> StreamQuery:
    """
    Query params arrive as raw strings so junk like h=abc degrades to
    "not given" instead of a 422.
    """
    return StreamQuery(
        url=trimmed(url),
        target_height=parse_int_or_none(h),
        min_height=parse_int_or_none(min_) or 0,
    )

def playlist_entry(
    name: Optional[str] = Query(None),
    logo: Optional[str] = Query(None),
    group: Optional[str] = Query(None),
    tvg_id: Optional[str] = Query(None),
) -> PlaylistEntry:
    # a channel always has a name; the other attrs default only when absent,
    # an explicit empty value drops the token
    return PlaylistEntry(
        name=trimmed(name) or DEFAULT_NAME,
        logo=trimmed(logo),
        group=trimmed(group, DEFAULT_GROUP),
        tvg_id=trimmed(tvg_id),
    )
