from .logging import get_logger, log_with_context

__all__ = ["get_logger", "log_with_context"]
