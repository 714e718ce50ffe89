# ABOUTME: Logging configuration and structured logging helpers
# ABOUTME: Provides loguru sinks plus structlog loggers and decorators for the pipeline

from .config import LoggingMode, configure_logging, get_logging_status
from .utils import get_logger, log_api_call, log_pipeline_step, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Utilities
    "get_logger",
    "log_api_call",
    "log_pipeline_step",
    "with_pipeline_context",
]
