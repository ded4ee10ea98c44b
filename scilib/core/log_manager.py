"""
Log manager for the scilib package logger.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Applications call :func:`setup_logging` (or build a
:class:`LogManager`) to route those records to the console or a rotating file.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional, Union

from .config.settings import ScilibConfig, get_config


PACKAGE_LOGGER = "scilib"

FORMATS = {
    "standard": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s",
}


class LogManager:
    """Configures handlers and level on the ``scilib`` logger."""
    
    def __init__(
        self,
        level: Union[str, int] = logging.WARNING,
        file_path: Optional[Union[str, Path]] = None,
        max_file_size: int = 10,  # MB
        backup_count: int = 5,
        format_type: str = "standard",
        enable_console: bool = True,
        config: Optional[ScilibConfig] = None
    ):
        """Initialize log manager.
        
        Parameters
        ----------
        level : str or int
            Logging level
        file_path : str or Path, optional
            Log file path
        max_file_size : int
            Max file size in MB for rotation
        backup_count : int
            Number of backup files to keep
        format_type : str
            Format type ("standard" or "detailed")
        enable_console : bool
            Enable console logging
        config : ScilibConfig, optional
            Configuration object; overrides ``level`` and fills ``file_path``
        """
        if format_type not in FORMATS:
            raise ValueError(f"format_type must be one of {list(FORMATS)}")
        
        # Load from config
        if config:
            level = config.get_log_level()
            file_path = file_path or config.log_file
        
        self.level = self._resolve_level(level)
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size * 1024 * 1024  # Convert to bytes
        self.backup_count = backup_count
        self.format_type = format_type
        
        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self._handlers: List[logging.Handler] = []
        self._previous_level = self.logger.level
        
        self.logger.setLevel(self.level)
        if enable_console:
            self.add_console_handler()
        if self.file_path is not None:
            self.add_file_handler(self.file_path)
        
        self.logger.debug("LogManager initialized")
    
    @staticmethod
    def _resolve_level(level: Union[str, int]) -> int:
        return level if isinstance(level, int) else getattr(logging, level.upper())
    
    def _create_formatter(self, format_type: Optional[str] = None) -> logging.Formatter:
        return logging.Formatter(FORMATS[format_type or self.format_type])
    
    def set_level(self, level: Union[str, int]) -> None:
        """Set logging level for the package logger and its handlers."""
        self.level = self._resolve_level(level)
        self.logger.setLevel(self.level)
        for handler in self._handlers:
            handler.setLevel(self.level)
    
    def add_file_handler(
        self,
        file_path: Union[str, Path],
        level: Optional[Union[str, int]] = None,
        format_type: Optional[str] = None
    ) -> logging.Handler:
        """Add file handler with rotation."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        
        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count
        )
        handler.setLevel(self._resolve_level(level) if level else self.level)
        handler.setFormatter(self._create_formatter(format_type))
        
        self.logger.addHandler(handler)
        self._handlers.append(handler)
        return handler
    
    def add_console_handler(
        self,
        level: Optional[Union[str, int]] = None,
        format_type: Optional[str] = None
    ) -> logging.Handler:
        """Add console handler, reusing one already writing to stderr."""
        for existing in self.logger.handlers:
            if type(existing) is logging.StreamHandler and existing.stream is sys.stderr:
                return existing
        
        handler = logging.StreamHandler()
        handler.setLevel(self._resolve_level(level) if level else self.level)
        handler.setFormatter(self._create_formatter(format_type))
        
        self.logger.addHandler(handler)
        self._handlers.append(handler)
        return handler
    
    @property
    def handlers(self) -> List[logging.Handler]:
        return list(self._handlers)
    
    def close(self) -> None:
        """Detach and close every handler this manager added and restore the level."""
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        self.logger.setLevel(self._previous_level)
    
    def __enter__(self) -> "LogManager":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def setup_logging(config: Optional[ScilibConfig] = None, **kwargs) -> LogManager:
    """Configure the package logger from ``config`` (default: global config)."""
    return LogManager(config=config or get_config(), **kwargs)
