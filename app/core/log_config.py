import logging
from .config import settings

logger = logging.getLogger("messagely")
logger.setLevel(settings.log_level.upper())

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
