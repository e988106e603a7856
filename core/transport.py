import json
import logging
from typing import Any, Mapping, Optional

import httpx

from core.config import EndpointConfig  # type: ignore
from core.models import HttpMethod, RequestSpec  # type: ignore
from core.results import HttpError, NetworkError, Success, ToolResult  # type: ignore
from utils import get_endpoint, parse_json_body, query_params  # type: ignore

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class ApiClient:
    """Translate a RequestSpec into one HTTP exchange against the configured API.

    Every outcome is returned as a result envelope; nothing is raised for
    HTTP status errors or transport failures.
    """

    def __init__(self, config: EndpointConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        url = httpx.URL(get_endpoint(self.config, path))
        query = query_params(params)
        if query:
            url = url.copy_merge_params(query)
        return str(url)

    async def request(self, spec: RequestSpec) -> ToolResult:
        url = self.build_url(spec.path, spec.params)
        content = json.dumps(spec.body).encode("utf-8") if spec.carries_body else None
        logger.debug("%s %s", spec.method, url)

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.config.timeout_seconds, follow_redirects=True
            ) as client:
                response = await client.request(spec.method, url, content=content, headers=HEADERS)
            data = parse_json_body(response)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Request {spec.method} {url} failed: {e}", exc_info=self.config.debug)
            return NetworkError(str(e) or type(e).__name__)

        if not response.is_success:
            logger.warning(f"{spec.method} {url} returned HTTP {response.status_code}")
            return HttpError(response.status_code, data)
        return Success(data)

    async def call(
        self,
        method: HttpMethod,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ToolResult:
        return await self.request(RequestSpec(method, path, body, params or {}))
