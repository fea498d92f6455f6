"""
╔═════════════════════════════════════════════════════════════════════════════╗
║                  CONFIGURATION MANAGER SCRIPT - ver. 01.00                  ║
║ Purpose: Settings and extension label loading for extension-count           ║
║ File:    config_manager.py                                                  ║
╠═════════════════════════════════════════════════════════════════════════════╣
║ Section 1: Initial Settings and Imports                                     ║
║ Purpose:   Configure initial settings, imports, and script variables        ║
╚═════════════════════════════════════════════════════════════════════════════╝
"""
import json
import os
import threading
from typing import Dict, Literal, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from extension_count.error_handling import ConfigurationError

# Looked up in the current directory, first match wins
DEFAULT_CONFIG_NAMES = ("extension_count.yaml", "extension_count.yml", "extension_count.json")
DEFAULT_LABELS_PATH = "labels.json"

SortKey = Literal["none", "count", "ext", "files"]

_config_lock = threading.Lock()
#
"""
╔═════════════════════════════════════════════════════════════════════════════╗
║ Section 2: Pydantic Configuration Models                                    ║
║ Purpose:   Define the data structure and validation for reporter settings   ║
╠═════════════════════════════════════════════════════════════════════════════╣
║ Class 2.1: ReporterSettings                                                 ║
║ Purpose:   Presentation, error policy and logging options                   ║
╚═════════════════════════════════════════════════════════════════════════════╝
"""
class ReporterSettings(BaseModel):
    limit: Optional[int] = None
    sort: SortKey = "none"
    reverse: bool = False
    plain: bool = False
    keep_going: bool = False
    labels_path: str = DEFAULT_LABELS_PATH
    labels: Dict[str, str] = {}
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("limit")
    @classmethod
    def limit_not_negative(cls, value):
        if value is not None and value < 0:
            raise ValueError("limit must be zero (unlimited) or a positive integer")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value):
        level = value.upper()
        if level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level
# End class
#
"""
╔═════════════════════════════════════════════════════════════════════════════╗
║ Class 2.2: ConfigManager                                                    ║
║ Purpose:   Manages loading and validation of settings and labels            ║
╚═════════════════════════════════════════════════════════════════════════════╝
"""
class ConfigManager:
    """
    Loads reporter settings from an optional YAML or JSON file.

    This class is thread-safe and uses Pydantic for data validation. With no
    file present, defaults are used.
    """
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self._settings: Optional[ReporterSettings] = None
        self.reload()
    # End function

    # =========================================================================
    # Function 2.2.1: _find_config
    # =========================================================================
    def _find_config(self) -> Optional[str]:
        if self.config_path is not None:
            if not os.path.isfile(self.config_path):
                raise ConfigurationError(f"Configuration file not found at {self.config_path}", self.config_path)
            return self.config_path
        for name in DEFAULT_CONFIG_NAMES:
            if os.path.isfile(name):
                return name
        return None

    # =========================================================================
    # Function 2.2.2: reload
    # =========================================================================
    def reload(self):
        """Reloads and re-validates settings from the configuration file."""
        with _config_lock:
            path = self._find_config()
            if path is None:
                logger.debug("No configuration file found, using defaults")
                self._settings = ReporterSettings()
                return

            try:
                with open(path, 'r', encoding='utf-8') as f:
                    if path.lower().endswith('.json'):
                        data = json.load(f)
                    else:
                        data = yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to parse configuration from {path}: {e}", path) from e
            except OSError as e:
                raise ConfigurationError(f"Failed to read configuration from {path}: {e}", path) from e

            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration in {path} must be a mapping", path)

            try:
                self._settings = ReporterSettings(**data)
            except ValidationError as e:
                raise ConfigurationError(f"Configuration validation error in {path}: {e}", path) from e
            logger.debug(f"Loaded configuration from {path}")
    # End function

    # =========================================================================
    # Function 2.2.3: get
    # =========================================================================
    def get(self) -> ReporterSettings:
        """Returns the current, validated settings object."""
        if self._settings is None:
            self.reload()
        with _config_lock:
            if self._settings is None:
                raise ConfigurationError("Configuration could not be loaded, and settings are unavailable.")
            return self._settings
    # End function

    # =========================================================================
    # Function 2.2.4: override
    # =========================================================================
    def override(self, **values) -> ReporterSettings:
        """
        Validated copy of the settings with the given values applied.

        ``None`` values are ignored, so unset command line flags keep the
        configured value.
        """
        data = self.get().model_dump()
        data.update({key: value for key, value in values.items() if value is not None})
        try:
            return ReporterSettings(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid option: {e}") from e
    # End function

    # =========================================================================
    # Function 2.2.5: load_labels
    # =========================================================================
    def load_labels(self, settings: Optional[ReporterSettings] = None) -> Dict[str, str]:
        """
        Extension labels from ``labels_path`` merged with inline ``labels``.

        Keys are normalised to lower case without a leading dot. A missing
        labels file is not an error.
        """
        settings = settings or self.get()
        labels: Dict[str, str] = {}
        path = settings.labels_path

        if os.path.isfile(path):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Failed to parse labels from {path}: {e}", path) from e
            except OSError as e:
                raise ConfigurationError(f"Failed to read labels from {path}: {e}", path) from e
            if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
                raise ConfigurationError(f"Labels in {path} must map extensions to strings", path)
            labels.update(data)
            logger.debug(f"Loaded {len(data)} labels from {path}")

        labels.update(settings.labels)
        return {key.lstrip('.').lower(): value for key, value in labels.items()}
    # End function
#
#
## End of script
