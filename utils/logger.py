"""Logging setup, imported once by the app shell. Modules log through `logging.getLogger(__name__)`."""
import logging

from utils import config

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO),
                    format="[%(asctime)s] %(levelname)s %(name)s – %(message)s")
