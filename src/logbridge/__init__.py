"""
logbridge – structured-logging bridge for host logging abstractions.

Import path convention::

    from logbridge.extensions import BridgeLoggerProvider, LogLevel
    from logbridge.events import EventLogger, LogEventLevel
    from logbridge.config import LogBridgeSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
