"""
Configuration management for DropWatch
"""

import codecs
import json
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, replace

import tomli

from .errors import ConfigError


# camelCase keys used by older drop-file configurations
_ALIASES = {
    'fileInfo': 'file_info',
    'directoryPath': 'directory_path',
    'filePath': 'directory_path',
    'fileName': 'file_name',
    'readOnStart': 'read_on_start',
    'logLevel': 'log_level',
    'pollingInterval': 'polling_interval',
}

LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


def _normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    return {_ALIASES.get(key, key): value for key, value in data.items()}


@dataclass(frozen=True)
class FileInfo:
    """Location of the drop file and how to treat it at startup"""
    directory_path: str = '.'
    file_name: str = ''
    read_on_start: bool = False
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileInfo':
        """Create FileInfo instance from dictionary"""
        data = _normalize_keys(data)
        read_on_start = data.get('read_on_start', False)
        if not isinstance(read_on_start, bool):
            raise ConfigError(f"read_on_start must be true or false, got {read_on_start!r}")
        return cls(
            directory_path=str(data.get('directory_path', '.')),
            file_name=str(data.get('file_name', '')),
            read_on_start=read_on_start
        )


@dataclass(frozen=True)
class Config:
    """Configuration class for DropWatch"""
    encoding: str = 'utf-8'
    log_level: str = 'info'
    polling_interval: float = 1.0
    file_info: FileInfo = field(default_factory=FileInfo)
    
    def __post_init__(self):
        try:
            codec_info = codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding: {self.encoding}")
        # bytes-to-bytes and str-to-str codecs (base64, rot13) can't decode files
        if not getattr(codec_info, '_is_text_encoding', True):
            raise ConfigError(f"Not a text encoding: {self.encoding}")
        if self.log_level.lower() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.polling_interval <= 0:
            raise ConfigError(f"polling_interval must be positive, got {self.polling_interval}")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config instance from dictionary"""
        # Handle both flat and nested config formats
        if 'dropwatch' in data:
            data = data['dropwatch']
        data = _normalize_keys(data)
        
        try:
            polling_interval = float(data.get('polling_interval', 1.0))
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid polling_interval: {data.get('polling_interval')!r}")
        
        return cls(
            encoding=data.get('encoding', 'utf-8'),
            log_level=data.get('log_level', 'info'),
            polling_interval=polling_interval,
            file_info=FileInfo.from_dict(data.get('file_info', {}))
        )
    
    def with_overrides(self, **overrides: Any) -> 'Config':
        """Return a copy with non-None values replaced.
        
        Keys of FileInfo (directory_path, file_name, read_on_start) are
        applied to the nested file_info.
        """
        file_info_keys = ('directory_path', 'file_name', 'read_on_start')
        values = {k: v for k, v in overrides.items() if v is not None}
        info_values = {k: values.pop(k) for k in file_info_keys if k in values}
        
        return replace(self, file_info=replace(self.file_info, **info_values), **values)


def load_config(config_path: str) -> Optional[Config]:
    """Load configuration from a TOML or JSON file"""
    try:
        config_file = Path(config_path)
        if not config_file.exists():
            return None
        
        if config_file.suffix == '.json':
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        else:
            # Default to TOML
            with open(config_file, 'rb') as f:
                data = tomli.load(f)
        
        return Config.from_dict(data)
    
    except Exception as e:
        print(f"Error loading config: {e}")
        return None


def load_default_config() -> Config:
    """Load the default configuration from the package"""
    try:
        default_config_path = Path(__file__).parent.parent / 'default.config.toml'
        with open(default_config_path, 'rb') as f:
            data = tomli.load(f)
        return Config.from_dict(data)
    except (OSError, tomli.TOMLDecodeError, ConfigError):
        # Return sensible defaults if default config can't be loaded
        return Config(
            encoding='utf-8',
            log_level='info',
            polling_interval=1.0,
            file_info=FileInfo(directory_path='.', file_name='drop.txt', read_on_start=True)
        )
