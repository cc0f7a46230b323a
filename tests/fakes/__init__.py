from .ticks import ManualTickHandle, ManualTickSource

__all__ = ["ManualTickHandle", "ManualTickSource"]
