# livehls/services/schemas/playlist.py
from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_NAME = "YouTube Live"
DEFAULT_GROUP = "YouTube"


class PlaylistEntry(BaseModel):
    name: str = Field(DEFAULT_NAME, examples=["Al Ekhbariya"])
    logo: str = Field("", examples=["https://example.com/logo.png"])
    group: str = Field(DEFAULT_GROUP, examples=["News"])
    tvg_id: str = Field("", examples=["news1"])
