"""Runtime-конфигурация bounded_cast (логирование)."""

from .logging import PACKAGE_LOGGER, configure_logging

__all__ = ["PACKAGE_LOGGER", "configure_logging"]
