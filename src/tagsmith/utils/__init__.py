"""Internal helpers for tagsmith."""

from tagsmith.utils.logger import ROOT_LOGGER, get_logger

__all__ = ["ROOT_LOGGER", "get_logger"]
