from .events import RunLog

__all__ = ["RunLog"]
