# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for SmartCLI."""
import logging

logger: logging.Logger = logging.getLogger("smartcli")
