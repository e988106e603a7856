from typing import Any, Mapping, Optional
from urllib.parse import quote

from core.config import EndpointConfig  # type: ignore


def normalize_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def query_value(value: Any) -> str:
    # booleans go upstream the way a JS client writes them
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_params(params: Optional[Mapping[str, Any]]) -> list[tuple[str, str]]:
    """Drop unset values and string-coerce the rest, keeping insertion order."""
    if not params:
        return []
    return [(key, query_value(value)) for key, value in params.items() if value is not None]


def path_segment(value: Any) -> str:
    """Percent-encode an identifier for interpolation into a path."""
    return quote(str(value), safe="")


def get_endpoint(config: EndpointConfig, path: str) -> str:
    """Return the fully-qualified URL `{base_url}/{api_version_prefix}{path}` (without query)."""
    return f"{config.base_url}/{config.api_version_prefix}{normalize_path(path)}"
