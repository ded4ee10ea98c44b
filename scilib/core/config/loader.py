"""
Configuration loaders for different file formats.

This module provides loaders for JSON and YAML configuration files and a
helper that turns a configuration file into a :class:`ScilibConfig`.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union, List
import json
import logging

import yaml

from ..base.exceptions import ConfigurationError
from .settings import ScilibConfig


logger = logging.getLogger(__name__)


class ConfigLoadError(ConfigurationError):
    """Raised when a configuration file cannot be read or parsed."""


class ConfigSaveError(ConfigurationError):
    """Raised when a configuration file cannot be written."""


class UnsupportedFormatError(ConfigurationError):
    """Raised when no loader handles the file extension."""


class ConfigLoader(ABC):
    """Abstract base class for configuration loaders.
    
    This class defines the interface that all configuration loaders must implement,
    ensuring consistent behavior across different file formats.
    """
    
    @abstractmethod
    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from file.
        
        Parameters
        ----------
        path : str or Path
            Path to configuration file
            
        Returns
        -------
        dict
            Configuration data
            
        Raises
        ------
        ConfigLoadError
            If loading fails
        """
        pass
    
    @abstractmethod
    def save(self, data: Dict[str, Any], path: Union[str, Path]) -> None:
        """Save configuration to file.
        
        Raises
        ------
        ConfigSaveError
            If saving fails
        """
        pass
    
    @property
    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """List of supported file extensions (including the dot)."""
        pass
    
    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable format name."""
        pass
    
    def preprocess_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Convert Path objects to strings before saving."""
        def convert_paths(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, dict):
                return {k: convert_paths(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [convert_paths(item) for item in obj]
            else:
                return obj
        
        return convert_paths(data)
    
    def _write(self, data: Dict[str, Any], path: Path, dump) -> None:
        if not isinstance(data, dict):
            raise ConfigSaveError(f"Data must be a dictionary for {self.format_name} format",
                                  config_file=str(path))
        
        processed_data = self.preprocess_data(data)
        
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                dump(processed_data, f)
        except OSError as e:
            raise ConfigSaveError(f"Failed to save {self.format_name} config to {path}",
                                  config_file=str(path), cause=e) from e
        
        logger.debug(f"Successfully saved {self.format_name} config to {path}")


class JSONConfigLoader(ConfigLoader):
    """JSON configuration loader."""
    
    @property
    def supported_extensions(self) -> List[str]:
        return ['.json']
    
    @property
    def format_name(self) -> str:
        return "JSON"
    
    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(path)
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Invalid JSON in {path}: {e}", config_file=str(path), cause=e) from e
        except FileNotFoundError as e:
            raise ConfigLoadError(f"Configuration file not found: {path}", config_file=str(path)) from e
        except OSError as e:
            raise ConfigLoadError(f"Failed to read {path}", config_file=str(path), cause=e) from e
        
        # Ensure we return a dictionary
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"JSON file must contain an object/dictionary, got {type(data).__name__}",
                config_file=str(path),
            )
        
        logger.debug(f"Successfully loaded JSON config from {path}")
        return data
    
    def save(self, data: Dict[str, Any], path: Union[str, Path]) -> None:
        self._write(
            data, Path(path),
            lambda obj, f: json.dump(obj, f, indent=2, ensure_ascii=False, sort_keys=True),
        )


class YAMLConfigLoader(ConfigLoader):
    """YAML configuration loader backed by PyYAML."""
    
    @property
    def supported_extensions(self) -> List[str]:
        return ['.yaml', '.yml']
    
    @property
    def format_name(self) -> str:
        return "YAML"
    
    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(path)
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML in {path}: {e}", config_file=str(path), cause=e) from e
        except FileNotFoundError as e:
            raise ConfigLoadError(f"Configuration file not found: {path}", config_file=str(path)) from e
        except OSError as e:
            raise ConfigLoadError(f"Failed to read {path}", config_file=str(path), cause=e) from e
        
        # Handle empty files
        if data is None:
            data = {}
        
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"YAML file must contain a mapping/dictionary, got {type(data).__name__}",
                config_file=str(path),
            )
        
        logger.debug(f"Successfully loaded YAML config from {path}")
        return data
    
    def save(self, data: Dict[str, Any], path: Union[str, Path]) -> None:
        self._write(
            data, Path(path),
            lambda obj, f: yaml.safe_dump(obj, f, default_flow_style=False, indent=2,
                                          allow_unicode=True, sort_keys=True),
        )


_LOADERS = {
    '.json': JSONConfigLoader,
    '.yaml': YAMLConfigLoader,
    '.yml': YAMLConfigLoader,
}


def get_config_loader(file_path: Union[str, Path]) -> ConfigLoader:
    """Get appropriate config loader for file extension.
    
    Raises
    ------
    UnsupportedFormatError
        If file format is not supported
    """
    suffix = Path(file_path).suffix.lower()
    
    if suffix not in _LOADERS:
        available = list(_LOADERS.keys())
        raise UnsupportedFormatError(
            f"Unsupported configuration file format: {suffix}. Available: {available}",
            config_file=str(file_path),
        )
    
    return _LOADERS[suffix]()


def load_config_file(file_path: Union[str, Path]) -> ScilibConfig:
    """Load a :class:`ScilibConfig` from a JSON or YAML file.
    
    Parameters
    ----------
    file_path : str or Path
        Path to configuration file
        
    Returns
    -------
    ScilibConfig
        Validated configuration
    """
    data = get_config_loader(file_path).load(file_path)
    config = ScilibConfig.from_dict(data)
    logger.info(f"Loaded configuration from {file_path}")
    return config


def save_config_file(config: ScilibConfig, file_path: Union[str, Path]) -> None:
    """Write ``config`` to a JSON or YAML file chosen by extension."""
    get_config_loader(file_path).save(config.to_dict(), file_path)
