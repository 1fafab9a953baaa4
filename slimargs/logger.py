# Slimargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for slimargs."""
import logging

logger: logging.Logger = logging.getLogger("slimargs")
