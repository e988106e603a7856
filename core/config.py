import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

import yaml
from dotenv import load_dotenv

API_VERSION_PREFIX = "api/v1"

DEFAULT_PAGE_LIMIT = 5
DEFAULT_TIMEOUT_MS = 30000

PAGE_LIMIT_RANGE = (1, 100)
TIMEOUT_RANGE = (1000, 60000)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when the server configuration is missing or invalid."""


@dataclass(frozen=True)
class EndpointConfig:
    base_url: str
    api_version_prefix: str = API_VERSION_PREFIX
    default_page_limit: int = DEFAULT_PAGE_LIMIT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    debug: bool = False

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


class ConfigLoader:
    """Resolve an EndpointConfig from YAML and environment settings.

    Precedence, lowest first: built-in defaults, the YAML file, environment
    variables. A `.env` file is loaded into the environment before reading it.
    """

    KEYS = ("JOEAPI_BASE_URL", "DEFAULT_PAGE_LIMIT", "REQUEST_TIMEOUT", "DEBUG_MODE")

    def __init__(self, config_path: Optional[str | Path] = None, environ: Optional[Mapping[str, str]] = None):
        if environ is None:
            load_dotenv()
            environ = os.environ
        self._environ = environ
        if config_path is None:
            config_path = environ.get("JOEAPI_CONFIG_FILE") or Path(__file__).resolve().parent.parent / "config.yaml"
        self._config_path = Path(config_path)

    def _load_yaml(self) -> dict[str, Any]:
        """
        Load the YAML file if present. Keys are matched case-insensitively.
        """
        if not self._config_path.is_file():
            return {}
        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"cannot read {self._config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"{self._config_path} is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{self._config_path} must contain a mapping of settings")
        return {str(k).upper(): v for k, v in data.items()}

    def raw_settings(self) -> dict[str, Any]:
        settings = self._load_yaml()
        for key in self.KEYS:
            value = self._environ.get(key)
            if value is not None and value != "":
                settings[key] = value
        return settings

    def load(self) -> EndpointConfig:
        settings = self.raw_settings()
        return EndpointConfig(
            base_url=_parse_base_url(settings.get("JOEAPI_BASE_URL")),
            default_page_limit=_parse_bounded_int(
                "DEFAULT_PAGE_LIMIT", settings.get("DEFAULT_PAGE_LIMIT"), DEFAULT_PAGE_LIMIT, PAGE_LIMIT_RANGE
            ),
            timeout_ms=_parse_bounded_int(
                "REQUEST_TIMEOUT", settings.get("REQUEST_TIMEOUT"), DEFAULT_TIMEOUT_MS, TIMEOUT_RANGE
            ),
            debug=_parse_bool("DEBUG_MODE", settings.get("DEBUG_MODE")),
        )


def _parse_base_url(value: Any) -> str:
    if value is None or not str(value).strip():
        raise ConfigError("'JOEAPI_BASE_URL' must be set (e.g. https://joeapi.fly.dev)")
    url = str(value).strip()
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ConfigError(f"'JOEAPI_BASE_URL' must be an absolute URL, got {url!r}")
    return url.rstrip("/")


def _parse_bounded_int(name: str, value: Any, default: int, bounds: tuple[int, int]) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}") from None
    low, high = bounds
    if not low <= number <= high:
        raise ConfigError(f"'{name}' must be between {low} and {high}, got {number}")
    return number


def _parse_bool(name: str, value: Any) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"'{name}' must be a boolean, got {value!r}")


def get_config(config_path: Optional[str | Path] = None, environ: Optional[Mapping[str, str]] = None) -> EndpointConfig:
    """
    Helper to resolve and validate the endpoint configuration in one call.
    """
    return ConfigLoader(config_path, environ).load()
