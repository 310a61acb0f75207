# livehls/services/resolver/service.py
from __future__ import annotations

from typing import Optional

from livehls.common.logging import get_logger
from livehls.domain.entities.stream import SelectionConstraint
from livehls.domain.errors import InvalidInput, ResolveError
from livehls.domain.policies.format_selector import FormatSelector
from livehls.domain.ports.probe import StreamProbePort

logger = get_logger()


class StreamResolver:
    """
    Application service: probe a source, then let FormatSelector choose one URL.
    Stateless between calls; every call runs a fresh probe.
    """

    def __init__(self, probe: StreamProbePort, selector: Optional[FormatSelector] = None) -> None:
        self.probe = probe
        self.selector = selector or FormatSelector()

    async def resolve(self, source_url: str, constraint: Optional[SelectionConstraint] = None) -> str:
        url = (source_url or "").strip()
        if not url:
            raise InvalidInput("missing url")
        constraint = constraint or SelectionConstraint()

        try:
            result = await self.probe.probe(url)
            resolved = self.selector.select(result, constraint)
        except ResolveError as e:
            logger.warning("resolve failed url=%s: %s: %s", url, type(e).__name__, e)
            raise

        logger.info(
            "resolved url=%s h=%s min=%s -> %s",
            url, constraint.target_height, constraint.min_height, resolved,
        )
        return resolved
