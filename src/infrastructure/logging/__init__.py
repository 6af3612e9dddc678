"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("task_created", task_id="123", owner_id="u1")
"""

from src.infrastructure.logging.config import RequestLogger, configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "RequestLogger"]
