# livehls/services/probe/ytdlp_adapter.py
from __future__ import annotations

import asyncio
import json
import shlex
import shutil
from typing import Any, List, Optional

from livehls.common.logging import get_logger
from livehls.common.settings import get_settings
from livehls.common.strings.parsers import parse_number
from livehls.domain.entities.stream import ProbeEntry, ProbeResult, StreamCandidate
from livehls.domain.errors import ProbeFailed, ProbeTimeout
from livehls.domain.ports.probe import StreamProbePort

logger = get_logger()


def build_ytdlp_cmd(
    ytdlp_bin: str,
    source_url: str,
    *,
    fmt: str = "best",
    extra_args: List[str] | None = None,
) -> List[str]:
    """
    Ask yt-dlp for the full metadata as one JSON document, never downloading.
    """
    cmd = [
        ytdlp_bin,
        "--dump-single-json",
        "--no-warnings",
        "--no-check-certificates",
        "--prefer-free-formats",
        "--format", fmt,
    ]
    if extra_args:
        cmd += list(extra_args)
    cmd += ["--", source_url]  # Stop option parsing in case the URL starts with "-"
    return cmd


class YtDlpAdapter(StreamProbePort):
    """
    Infrastructure adapter implementing StreamProbePort by running `yt-dlp`
    as a child process. One process per call; nothing is shared between calls.
    """

    def __init__(
        self,
        ytdlp_bin: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        fmt: Optional[str] = None,
        extra_args: Optional[List[str]] = None,
    ):
        cfg = get_settings().probe
        self.ytdlp_bin = ytdlp_bin or cfg.bin
        self.timeout_sec = float(timeout_sec or cfg.timeout_sec)
        self.fmt = fmt or cfg.format
        self.extra_args = list(extra_args) if extra_args is not None else shlex.split(cfg.extra_args)

    # ---- Port API -------------------------------------------------------------
    async def probe(self, source_url: str) -> ProbeResult:
        cmd = build_ytdlp_cmd(self._resolve_bin(), source_url, fmt=self.fmt, extra_args=self.extra_args)
        logger.debug("yt-dlp cmd: %s", " ".join(shlex.quote(p) for p in cmd))

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            # ValueError: argv the OS cannot take, e.g. an embedded NUL in the URL
            raise ProbeFailed(f"Failed to execute yt-dlp: {e}", stderr=str(e)) from e

        try:
            out, err = await asyncio.wait_for(proc.communicate(), timeout=self.timeout_sec)
        except asyncio.TimeoutError as e:
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise ProbeTimeout(f"yt-dlp timed out after {self.timeout_sec:g}s") from e
        except asyncio.CancelledError:
            # client went away; don't leave the child running
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise

        stderr = err.decode("utf-8", "replace")
        if proc.returncode != 0:
            raise ProbeFailed(_error_message(stderr, proc.returncode), stderr=stderr, rc=proc.returncode)

        try:
            data = json.loads(out.decode("utf-8", "replace") or "null")
        except json.JSONDecodeError as e:
            raise ProbeFailed("yt-dlp produced invalid JSON", stderr=stderr) from e
        if not isinstance(data, dict):
            raise ProbeFailed("yt-dlp produced no metadata object", stderr=stderr)

        return parse_ytdlp_json(data)

    def _resolve_bin(self) -> str:
        if "/" in self.ytdlp_bin:
            return self.ytdlp_bin
        # resolve to an absolute path for nicer errors
        resolved = shutil.which(self.ytdlp_bin)
        if not resolved:
            raise ProbeFailed(f"{self.ytdlp_bin} not found on PATH; set PROBE__BIN or install yt-dlp.")
        return resolved


# ---- Parsing helpers ----------------------------------------------------------
def parse_ytdlp_json(data: dict) -> ProbeResult:
    """
    Map a yt-dlp info dict onto ProbeResult. Safe to call in unit tests with
    fixture JSON; unknown or malformed fields degrade to defaults.
    """
    entries = data.get("entries")
    if not isinstance(entries, list):
        entries = []

    return ProbeResult(
        formats=_parse_formats(data),
        entries=tuple(
            ProbeEntry(formats=_parse_formats(e), hls_manifest_url=_str_or_none(e.get("hls_manifest_url")))
            for e in entries
            if isinstance(e, dict)
        ),
        hls_manifest_url=_str_or_none(data.get("hls_manifest_url")),
        raw=data,
    )


def _parse_formats(obj: dict) -> tuple[StreamCandidate, ...]:
    formats = obj.get("formats")
    if not isinstance(formats, list):
        return ()
    return tuple(_parse_format(f) for f in formats if isinstance(f, dict))


def _parse_format(f: dict) -> StreamCandidate:
    return StreamCandidate(
        url=_str(f.get("url")),
        height=max(0, int(parse_number(f.get("height")))),
        bitrate=max(0.0, parse_number(f.get("tbr"))),
        video_codec=_str(f.get("vcodec")),
        extension=_str(f.get("ext")),
        protocol=_str(f.get("protocol")),
    )


# ---- tiny parse helpers -------------------------------------------------------
def _str(x: Any) -> str:
    return x if isinstance(x, str) else ""


def _str_or_none(x: Any) -> Optional[str]:
    return x if isinstance(x, str) and x else None


def _error_message(stderr: str, rc: Optional[int]) -> str:
    # yt-dlp prints "ERROR: ..." as its last meaningful line
    lines = [ln.strip() for ln in stderr.splitlines() if ln.strip()]
    for ln in reversed(lines):
        if ln.startswith("ERROR:"):
            return ln
    if lines:
        return lines[-1]
    return f"yt-dlp returned non-zero exit code {rc}"
