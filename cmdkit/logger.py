# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for cmdkit."""
import logging

logger: logging.Logger = logging.getLogger("cmdkit")
