from __future__ import annotations
from typing import Protocol
from livehls.domain.entities.stream import ProbeResult

class StreamProbePort(Protocol):
    async def probe(self, source_url: str) -> ProbeResult: ...
