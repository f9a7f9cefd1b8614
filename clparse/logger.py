# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for clparse."""
import logging

logger: logging.Logger = logging.getLogger("clparse")
