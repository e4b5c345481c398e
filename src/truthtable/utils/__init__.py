from .events import log_event

__all__ = ["log_event"]
