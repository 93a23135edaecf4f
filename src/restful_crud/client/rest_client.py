"""
Async REST client for the objects API
Thin wrapper over httpx returning status, parsed JSON and typed models
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from restful_crud.config import HarnessConfig, get_config
from restful_crud.exceptions import ResponseParseError, TransportError
from restful_crud.models import ObjectPayload
from restful_crud.utils.error_handling import StructuredLogger

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

OBJECTS_ENDPOINT = "/objects"


@dataclass
class ApiResponse:
    """One HTTP exchange with the objects API"""
    method: str
    url: str
    status_code: int
    text: str
    elapsed: float
    body: Any = None
    parse_error: Optional[str] = None
    raw: Optional[httpx.Response] = None

    @property
    def success(self) -> bool:
        return self.status_code < 400

    def _fail_parse(self, reason: str) -> ResponseParseError:
        trace_id = StructuredLogger.log_error(
            "response_parse_error",
            f"Unusable response body from {self.method} {self.url}: {reason}",
            request=self.raw.request if self.raw is not None else None,
            response=self.raw,
        )
        return ResponseParseError(self.method, self.url, self.status_code, reason, trace_id=trace_id)

    def json(self) -> Any:
        """Parsed JSON body, or ResponseParseError when empty or malformed"""
        if self.parse_error:
            raise self._fail_parse(self.parse_error)
        return self.body

    def parse_as(self, model: Type[M]) -> M:
        body = self.json()
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise self._fail_parse(f"does not match {model.__name__}: {e}") from e

    def parse_list(self, model: Type[M]) -> List[M]:
        body = self.json()
        if not isinstance(body, list):
            raise self._fail_parse(f"expected a JSON array, got {type(body).__name__}")
        try:
            return [model.model_validate(item) for item in body]
        except ValidationError as e:
            raise self._fail_parse(f"list item does not match {model.__name__}: {e}") from e


class ObjectsApiClient:
    """REST client for /objects; use as an async context manager"""

    def __init__(self, config: Optional[HarnessConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ObjectsApiClient":
        self._client = httpx.AsyncClient(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make REST request and parse the JSON body if there is one"""
        if self._client is None:
            raise RuntimeError("ObjectsApiClient must be entered with 'async with' before use")

        method = method.upper()
        if method not in ("GET", "POST", "PUT", "DELETE"):
            raise ValueError(f"Unsupported method: {method}")

        url = f"{self.config.api_base_url}{endpoint}"
        start_time = time.monotonic()
        try:
            response = await self._client.request(method, endpoint, json=data)
        except httpx.HTTPError as e:
            trace_id = StructuredLogger.log_error(
                "transport_error",
                f"{method} {url} failed",
                exception=e,
                extra_context={"payload": data},
            )
            raise TransportError(method, url, str(e) or type(e).__name__, trace_id=trace_id) from e
        elapsed = time.monotonic() - start_time

        logger.info(f"{method} {url} -> {response.status_code} ({elapsed:.2f}s)")

        body = None
        parse_error = None
        if not response.text.strip():
            parse_error = "empty response body"
        else:
            try:
                body = response.json()
            except json.JSONDecodeError as e:
                parse_error = f"invalid JSON: {e}"

        return ApiResponse(
            method=method,
            url=url,
            status_code=response.status_code,
            text=response.text,
            elapsed=elapsed,
            body=body,
            parse_error=parse_error,
            raw=response,
        )

    async def list_objects(self) -> ApiResponse:
        return await self.request("GET", OBJECTS_ENDPOINT)

    async def create_object(self, payload: ObjectPayload) -> ApiResponse:
        return await self.request("POST", OBJECTS_ENDPOINT, data=payload.model_dump(exclude_none=True))

    async def get_object(self, object_id: str) -> ApiResponse:
        return await self.request("GET", f"{OBJECTS_ENDPOINT}/{object_id}")

    async def update_object(self, object_id: str, payload: ObjectPayload) -> ApiResponse:
        return await self.request("PUT", f"{OBJECTS_ENDPOINT}/{object_id}", data=payload.model_dump(exclude_none=True))

    async def delete_object(self, object_id: str) -> ApiResponse:
        return await self.request("DELETE", f"{OBJECTS_ENDPOINT}/{object_id}")
