"""
Logging setup for the vue-hooks-plus MCP server

stdout carries the JSON-RPC stream, so console output goes to stderr.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from vue_hooks_mcp.config.config import LoggingConfig


class MCPLogger:
    """Root logger configuration for the server process"""

    def __init__(self, config: LoggingConfig):
        self.config = config
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging configuration"""
        logger = logging.getLogger()
        logger.setLevel(getattr(logging, self.config.level.upper(), logging.INFO))

        # Clear existing handlers
        logger.handlers.clear()

        formatter = logging.Formatter(self.config.format)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File handler (if specified)
        if self.config.file_path:
            log_path = Path(self.config.file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=self.config.max_file_size,
                backupCount=self.config.backup_count,
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)


def setup_logging(config: LoggingConfig) -> MCPLogger:
    """Setup logging for the application"""
    return MCPLogger(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)
