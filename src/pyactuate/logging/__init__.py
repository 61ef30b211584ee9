"""pyactuate logging — logging port and structlog adapter."""

from pyactuate.logging.port import LoggingPort
from pyactuate.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
