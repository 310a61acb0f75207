# livehls/domain/entities/stream.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class StreamCandidate:
    """
    One stream variant reported by the probe.
    Zero height/bitrate means "unknown"; empty strings mean "not reported".
    """
    url: str = ""
    height: int = 0
    bitrate: float = 0.0
    video_codec: str = ""
    extension: str = ""
    protocol: str = ""


@dataclass(frozen=True)
class ProbeEntry:
    """A sub-stream of a multi-stream source (yt-dlp playlist entry)."""
    formats: Tuple[StreamCandidate, ...] = ()
    hls_manifest_url: Optional[str] = None


@dataclass(frozen=True)
class ProbeResult:
    """
    Normalized, framework-free result of probing a source URL.
    Produced by an adapter and consumed by the format selector.
    """
    formats: Tuple[StreamCandidate, ...] = ()
    entries: Tuple[ProbeEntry, ...] = ()
    hls_manifest_url: Optional[str] = None

    # Optional raw payload for debugging
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class SelectionConstraint:
    target_height: Optional[int] = None
    min_height: int = 0

    @classmethod
    def from_raw(cls, target_height: object = None, min_height: object = None) -> "SelectionConstraint":
        """
        Normalize loosely-typed inputs: a target that is not a positive int is
        dropped, a min height that is not an int (or is negative) becomes 0.
        """
        target = target_height if _is_int(target_height) and target_height > 0 else None
        floor = min_height if _is_int(min_height) and min_height > 0 else 0
        return cls(target_height=target, min_height=floor)


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)
