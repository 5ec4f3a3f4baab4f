# Portfolio site package init
import logging
import os

from dotenv import find_dotenv, load_dotenv


def _load_env() -> None:
    # Search from the working directory so a deployment's .env is found
    load_dotenv(find_dotenv(usecwd=True))


def _configure_logging() -> None:
    level_name = (os.getenv("PORTFOLIO_LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logger = logging.getLogger("portfolio")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[PORTFOLIO][%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)

    contact_level_name = (os.getenv("PORTFOLIO_CONTACT_LOG_LEVEL") or level_name).upper()
    contact_level = getattr(logging, contact_level_name, level)
    logging.getLogger("portfolio.contact").setLevel(contact_level)


_load_env()
_configure_logging()
