"""Configuration loading."""

from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigError


DEFAULT_CONFIG_PATH = "config/config.yaml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Load configuration from YAML file. A missing file yields {}."""
    config_file = Path(config_path)
    if not config_file.exists():
        return {}

    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class Settings:
    """Runtime settings with defaults for every key."""
    dns_timeout: float = 5.0
    dns_max_concurrent: int = 4
    whois_rate_limit_delay: float = 0.0
    whois_backoff_delay: float = 5.0
    output_format: str = "table"
    log_level: str = "WARNING"
    suffix_premiums: Optional[Dict[str, float]] = None
    premium_words: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        dns = data.get('dns') or {}
        whois = data.get('whois') or {}
        output = data.get('output') or {}
        logging_cfg = data.get('logging') or {}
        valuation = data.get('valuation') or {}

        try:
            return cls(
                dns_timeout=float(dns.get('timeout', cls.dns_timeout)),
                dns_max_concurrent=int(dns.get('max_concurrent', cls.dns_max_concurrent)),
                whois_rate_limit_delay=float(whois.get('rate_limit_delay', cls.whois_rate_limit_delay)),
                whois_backoff_delay=float(whois.get('backoff_delay', cls.whois_backoff_delay)),
                output_format=str(output.get('format', cls.output_format)),
                log_level=str(logging_cfg.get('level', cls.log_level)).upper(),
                suffix_premiums=_suffix_premiums(valuation.get('suffix_premiums')),
                premium_words=_word_list(valuation.get('premium_words'))
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "Settings":
        return cls.from_dict(load_config(config_path))


def _suffix_premiums(raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, float]]:
    if raw is None:
        return None
    premiums = {}
    for suffix, coefficient in raw.items():
        suffix = str(suffix).lower()
        if not suffix.startswith('.'):
            suffix = '.' + suffix
        coefficient = float(coefficient)
        if not 0.0 <= coefficient <= 1.0:
            raise ValueError(f"suffix premium for {suffix} must be within [0, 1], got {coefficient}")
        premiums[suffix] = coefficient
    return premiums


def _word_list(raw: Optional[List[Any]]) -> Optional[List[str]]:
    if raw is None:
        return None
    return [str(word).lower() for word in raw]
