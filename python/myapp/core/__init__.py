"""
Core building blocks shared by the HTTP layer.
"""

from myapp.core.clock import Clock, SystemClock, format_rfc3339

__all__ = ["Clock", "SystemClock", "format_rfc3339"]
