# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for gnuopt."""
import logging

logger: logging.Logger = logging.getLogger("gnuopt")
