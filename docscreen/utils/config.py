"""
Configuration management for DocScreen.

This module provides the settings dataclass holding every tunable
constant of the analysis pipeline and the manager that loads and
saves it as JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, asdict

from .exceptions import ConfigurationError


log = logging.getLogger(__name__)


STOP_WORDS = [
    'the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have', 'i',
    'it', 'for', 'not', 'on', 'with', 'he', 'as', 'you', 'do', 'at',
    'this', 'but', 'his', 'by', 'from', 'they', 'we', 'say', 'her', 'she',
    'or', 'an', 'will', 'my', 'one', 'all', 'would', 'there', 'their', 'what',
    'so', 'up', 'out', 'if', 'about', 'who', 'get', 'which', 'go', 'me',
]

SIGNAL_WORDS = [
    'conclusion', 'result', 'therefore', 'thus', 'show', 'demonstrate', 'find', 'observe',
]

MAX_DOCUMENT_BYTES = 10 * 1024 * 1024


@dataclass
class Settings:
    """
    Application settings and configuration parameters.

    Attributes:
        analysis: Constants of the keyword, abstract, summary and
            similarity algorithms
        processing: Resource limits, worker pool size and timeouts
    """
    analysis: Dict[str, Any] = field(default_factory=lambda: {
        "keyword_limit": 10,
        "min_keyword_length": 4,
        "stop_words": list(STOP_WORDS),
        "summary_sentences": 5,
        "signal_words": list(SIGNAL_WORDS),
        "position_fraction": 0.2,
        "abstract_min_length": 100,
        "abstract_max_length": 2000,
        "reporting_threshold": 10.0,
        "rejection_threshold": 30.0,
        "preview_length": 200,
        "similarity_metric": "dice",
    })

    processing: Dict[str, Any] = field(default_factory=lambda: {
        "max_document_bytes": MAX_DOCUMENT_BYTES,
        "max_workers": 4,
        "comparison_timeout_seconds": 60,
        "timeout_seconds": 300,
    })


class Config:
    """
    Configuration manager for DocScreen.

    Provides centralized configuration management with support for:
    - Default settings
    - User configuration files
    - Runtime configuration changes
    """

    DEFAULT_CONFIG_FILE = "docscreen_config.json"
    USER_CONFIG_DIR = Path.home() / ".config" / "docscreen"

    NUMERIC_LIMITS = {
        "keyword_limit": (1, None),
        "min_keyword_length": (1, None),
        "summary_sentences": (1, None),
        "position_fraction": (0.0, 0.5),
        "abstract_min_length": (0, None),
        "abstract_max_length": (1, None),
        "reporting_threshold": (0.0, 100.0),
        "rejection_threshold": (0.0, 100.0),
        "preview_length": (0, None),
        "max_document_bytes": (1, None),
        "max_workers": (1, None),
        "comparison_timeout_seconds": (0.0, None),
        "timeout_seconds": (0.0, None),
    }
    WORD_LIST_SETTINGS = ("stop_words", "signal_words")

    def __init__(self, config_file: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to configuration file
        """
        self.settings = Settings()
        self.config_file = Path(config_file) if config_file else self.USER_CONFIG_DIR / self.DEFAULT_CONFIG_FILE
        self._load_configuration()

    def _load_configuration(self) -> None:
        """Load configuration from file if it exists."""
        if not self.config_file.exists():
            log.info("Using default configuration")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            self._update_settings_from_dict(config_data)
            log.info(f"Configuration loaded from {self.config_file}")
        except (OSError, ValueError, ConfigurationError) as e:
            log.warning(f"Failed to load configuration from {self.config_file}: {e}")
            log.info("Using default configuration")
            self.settings = Settings()

    def _update_settings_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Update settings from dictionary."""
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration root must be an object")

        if "analysis" in config_dict:
            self.set_analysis_config(config_dict["analysis"], save=False)

        if "processing" in config_dict:
            self.set_processing_config(config_dict["processing"], save=False)

    def _check_values(self, section: str, values: Dict[str, Any]) -> None:
        if not isinstance(values, dict):
            raise ConfigurationError(f"Section '{section}' must be an object", config_key=section)

        current = getattr(self.settings, section)
        for key, value in values.items():
            if key not in current:
                log.warning(f"Unknown {section} setting: {key}")
                continue

            if key in self.WORD_LIST_SETTINGS:
                if not isinstance(value, list) or not all(isinstance(w, str) for w in value):
                    raise ConfigurationError(f"Setting {key} must be a list of strings", config_key=key,
                                             config_value=str(value))
                continue

            if key == "similarity_metric":
                from ..core.similarity import METRICS
                if not isinstance(value, str) or value not in METRICS:
                    raise ConfigurationError(f"Unknown similarity metric. Available: {', '.join(METRICS)}",
                                             config_key=key, config_value=str(value))
                continue

            limits = self.NUMERIC_LIMITS.get(key)
            if limits is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"Setting {key} must be a number", config_key=key,
                                         config_value=str(value))
            low, high = limits
            if (low is not None and value < low) or (high is not None and value > high):
                raise ConfigurationError(f"Setting {key} is out of range", config_key=key,
                                         config_value=str(value))

    def save_configuration(self, config_file: Optional[Union[str, Path]] = None) -> None:
        """
        Save current configuration to file.

        Args:
            config_file: Optional path to save configuration file
        """
        save_path = Path(config_file) if config_file else self.config_file
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self.settings), f, indent=2, ensure_ascii=False)

        log.info(f"Configuration saved to {save_path}")

    def get_analysis_config(self) -> Dict[str, Any]:
        """Get analysis configuration."""
        return dict(self.settings.analysis)

    def set_analysis_config(self, config: Dict[str, Any], save: bool = False) -> None:
        """
        Update analysis configuration.

        Args:
            config: Partial analysis configuration
            save: Persist the configuration afterwards

        Raises:
            ConfigurationError: If a value is invalid
        """
        self._check_values("analysis", config)
        self.settings.analysis.update({k: v for k, v in config.items() if k in self.settings.analysis})
        log.info("Analysis configuration updated")
        if save:
            self.save_configuration()

    def get_processing_config(self) -> Dict[str, Any]:
        """Get processing configuration."""
        return dict(self.settings.processing)

    def set_processing_config(self, config: Dict[str, Any], save: bool = False) -> None:
        """Update processing configuration; same contract as set_analysis_config."""
        self._check_values("processing", config)
        self.settings.processing.update({k: v for k, v in config.items() if k in self.settings.processing})
        log.info("Processing configuration updated")
        if save:
            self.save_configuration()

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self.settings = Settings()
        log.info("Configuration reset to defaults")

    def get_config_summary(self) -> str:
        """
        Get a summary of current configuration.

        Returns:
            Formatted configuration summary
        """
        summary = []
        summary.append("=== DocScreen Configuration Summary ===")
        summary.append(f"Config file: {self.config_file}")
        summary.append("")

        summary.append("Analysis:")
        for key, value in self.settings.analysis.items():
            if isinstance(value, list):
                value = f"{len(value)} entries"
            summary.append(f"  {key}: {value}")
        summary.append("")

        summary.append("Processing:")
        for key, value in self.settings.processing.items():
            summary.append(f"  {key}: {value}")

        return "\n".join(summary)

    def validate_configuration(self) -> bool:
        """
        Validate current configuration.

        Returns:
            True if configuration is valid
        """
        try:
            self._check_values("analysis", self.settings.analysis)
            self._check_values("processing", self.settings.processing)
        except ConfigurationError as e:
            log.warning(f"Invalid configuration: {e}")
            return False

        analysis = self.settings.analysis
        if analysis["abstract_min_length"] >= analysis["abstract_max_length"]:
            return False
        return True
