import logging.config
import os
from pathlib import Path

LOGGING_CONF = Path(__file__).resolve().parent.parent / "logging.conf"

# Ensure logs directory exists
os.makedirs("logs", exist_ok=True)

logging.config.fileConfig(str(LOGGING_CONF), disable_existing_loggers=False)


logger = logging.getLogger("app")
