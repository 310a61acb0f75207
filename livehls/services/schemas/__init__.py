from livehls.services.schemas.playlist import PlaylistEntry
from livehls.services.schemas.stream import StreamQuery

__all__ = [
    "PlaylistEntry",
    "StreamQuery",
]
