# livehls/domain/policies/format_selector.py
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from livehls.domain.entities.stream import ProbeResult, SelectionConstraint, StreamCandidate
from livehls.domain.errors import NoStreamingFormat

MANIFEST_TAG = "m3u8"
MANIFEST_SUFFIX = ".m3u8"

# Must exceed any realistic height*10 + bitrate spread.
TV_CODEC_BONUS = 10000
TV_CODEC_PATTERN = re.compile(r"avc1|h264", re.IGNORECASE)


class FormatSelector:
    """
    Picks exactly one HLS URL out of a probe result.

    Rules:
      - Candidates are the top-level formats followed by every entry's formats,
        in discovery order. Duplicated URLs stay separate candidates.
      - Only manifest-style candidates qualify (extension, protocol or URL says m3u8).
      - Nothing qualifies: hand back the fallback manifest URL unscored, else fail.
      - score = height*10 + bitrate, plus TV_CODEC_BONUS for H.264.
      - Pool = qualifying candidates at or above min_height.
        With a target: best of the pool at or under target, else best of the pool.
        Without a target: best of the pool.
        Empty pool: best of everything that qualified.
      - Ties go to the first-discovered candidate.
    """

    # ---------------- public ----------------

    def select(self, result: ProbeResult, constraint: SelectionConstraint) -> str:
        hls = [c for c in self.flatten(result) if self.is_manifest(c)]

        if not hls:
            fallback = self.fallback_manifest(result)
            if fallback:
                return fallback
            raise NoStreamingFormat("no HLS formats")

        target = constraint.target_height
        pool = [c for c in hls if c.height >= constraint.min_height]

        if target:
            at_or_below = [c for c in pool if c.height <= target]
            if at_or_below:
                return self.best(at_or_below).url

        return self.best(pool or hls).url

    # ---------------- building blocks ----------------

    @staticmethod
    def flatten(result: ProbeResult) -> List[StreamCandidate]:
        out: List[StreamCandidate] = list(result.formats)
        for entry in result.entries:
            out.extend(entry.formats)
        return out

    @staticmethod
    def is_manifest(c: StreamCandidate) -> bool:
        # Upstream metadata is inconsistent; any one of the three signals is enough.
        if not c.url:
            return False
        return (
            c.extension.lower() == MANIFEST_TAG
            or MANIFEST_TAG in c.protocol.lower()
            or MANIFEST_SUFFIX in c.url.lower()
        )

    @staticmethod
    def fallback_manifest(result: ProbeResult) -> Optional[str]:
        if result.hls_manifest_url:
            return result.hls_manifest_url
        return next((e.hls_manifest_url for e in result.entries if e.hls_manifest_url), None)

    @staticmethod
    def score(c: StreamCandidate) -> float:
        s = c.height * 10 + c.bitrate
        if TV_CODEC_PATTERN.search(c.video_codec or ""):
            s += TV_CODEC_BONUS
        return s

    @classmethod
    def best(cls, candidates: Iterable[StreamCandidate]) -> StreamCandidate:
        # max() keeps the first of equal scores
        return max(candidates, key=cls.score)


def select_stream_url(result: ProbeResult, constraint: SelectionConstraint | None = None) -> str:
    return FormatSelector().select(result, constraint or SelectionConstraint())
