"""
Config Manager - Laravel-style configuration access
Access config files using dot notation
"""

import importlib
import threading
from typing import Any, Optional, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        warn = Config.get('routing.WARN_ON_DUPLICATE_NAMES', False)

        # Set runtime value
        Config.set('app.url', 'https://example.org')

        # Check existence
        if Config.has('app.url'):
            ...

    Config files live in the application's config package:
        config/
        ├── app.py
        ├── routing.py
        └── logging.py
    """

    _lock = threading.Lock()
    _package: str = 'config'
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def use_package(cls, package: str):
        """
        Read config files from another package

        Args:
            package: Dotted package name holding the config modules
        """
        with cls._lock:
            cls._package = package
            cls._loaded.clear()

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'app.url', 'routing.WARN_ON_DUPLICATE_NAMES')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        file_name, *path = key_lower.split('.')

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)
        if value is None:
            return default

        for part in path:
            found, value = cls._lookup(value, part)
            if not found:
                return default

        return value

    @staticmethod
    def _lookup(container: Any, part: str):
        """Case-insensitive attribute or key lookup, returns (found, value)"""
        if isinstance(container, dict):
            for dict_key in container:
                if str(dict_key).lower() == part:
                    return True, container[dict_key]
            return False, None

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return True, getattr(container, attr_name)

        return False, None

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config module from the config package

        Args:
            file_name: Config module name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                cls._loaded[file_name] = importlib.import_module(f'{cls._package}.{file_name}')
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Args:
            key: Config key in dot notation (case-insensitive)
            value: Value to set
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """
        Get the whole config module

        Args:
            file_name: Config module name

        Returns:
            Config module or None
        """
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            names = [file_name] if file_name else list(cls._loaded)
            for name in names:
                cls._loaded.pop(name, None)

        for name in names:
            cls._load_config_file(name)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
