# livehls/services/playlist/m3u.py
from __future__ import annotations

from livehls.services.schemas.playlist import PlaylistEntry


def render_attrs(entry: PlaylistEntry) -> str:
    attrs = []
    if entry.tvg_id:
        attrs.append(f'tvg-id="{entry.tvg_id}"')
    if entry.logo:
        attrs.append(f'tvg-logo="{entry.logo}"')
    if entry.group:
        attrs.append(f'group-title="{entry.group}"')
    return " ".join(attrs)


def render_m3u(entry: PlaylistEntry, stream_url: str) -> str:
    """Single-entry extended M3U document pointing at stream_url."""
    return (
        "#EXTM3U\n"
        f"#EXTINF:-1 {render_attrs(entry)},{entry.name}\n"
        f"{stream_url}\n"
    )
