from __future__ import annotations

import logging

from dotenv import load_dotenv

from persistence import Store
from persistence.paths import default_store_path
from settings import get_settings

logger = logging.getLogger(__name__)


def create_store() -> Store:
    """
    Open the application's default store.

    Reads local.env (if present) before settings so SUPERTASK_* overrides apply.
    """
    load_dotenv("local.env")
    settings = get_settings()

    logging.getLogger("persistence").setLevel(settings.log_level)

    path = default_store_path()
    logger.debug("opening default store at %s", path)
    return Store.open(path)
