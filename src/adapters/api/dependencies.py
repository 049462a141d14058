from __future__ import annotations

import logging
from functools import lru_cache

from src.adapters.config import AppConfig
from src.adapters.persistence import JsonCatalogueRepository
from src.app.services.request_handler import RequestHandler

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_request_handler() -> RequestHandler:
    # The network is static: load and build it once per process.
    cfg = AppConfig.from_env()
    logger.info("Loading transit network from %s", cfg.catalogue_path)
    return RequestHandler.from_repository(
        JsonCatalogueRepository(path=cfg.catalogue_path)
    )
