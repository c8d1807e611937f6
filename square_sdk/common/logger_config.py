# square_sdk/common/logger_config.py
"""Application-wide logging configuration."""

import logging

from rich.logging import RichHandler

from square_sdk.common.config.settings import settings

# Per-key DEBUG records from decoding; only useful when chasing payload mismatches
CODEC_LOGGER = "square_sdk.common.serialization"


def setup_logging() -> None:
    """Routes all records through one rich console handler at ``settings.LOG_LEVEL``."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [RichHandler(show_path=False, markup=False, rich_tracebacks=True)]

    codec_level = logging.DEBUG if settings.LOG_DECODE_DETAILS else max(log_level, logging.INFO)
    logging.getLogger(CODEC_LOGGER).setLevel(codec_level)
