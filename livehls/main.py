# livehls/main.py
from __future__ import annotations

import uvicorn

from livehls.common.logging import get_logger
from livehls.common.settings import get_settings


def main() -> None:
    cfg = get_settings()
    logger = get_logger()
    logger.info("Server running on http://%s:%s", cfg.host, cfg.port)
    uvicorn.run(
        "livehls.services.api.app:app",
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
