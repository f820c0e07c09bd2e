import abc
import logging

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from errors.errors import PublicBlogAPIError

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, PublicBlogAPIError) and exc.is_retryable()


class BaseAPIClient(abc.ABC):
    DEFAULT_BASE_URL: str

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: int = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url or self.DEFAULT_BASE_URL,
            timeout=timeout,
            transport=transport,
        )

    @retry(
        retry=retry_if_exception(_is_retryable),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict:
        try:
            resp = await self._client.get(path, params=params)
        except httpx.TransportError as e:
            logger.error("Transport error", extra={"url": path})
            raise PublicBlogAPIError(str(e) or "Transport error", url=path) from e
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error",
                extra={"status": e.response.status_code, "url": str(e.request.url)},
            )
            raise PublicBlogAPIError(
                "HTTP error",
                status=e.response.status_code,
                url=str(e.request.url),
            ) from e
        return resp.json()

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
