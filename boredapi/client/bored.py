import logging
from collections.abc import Callable

import httpx

from boredapi.client.decoder import decode_activity
from boredapi.client.errors import ApiError, BadResponse, HttpError
from boredapi.core.config import settings
from boredapi.models.activity import Activity
from boredapi.query.selection import CriteriaSelection

logger = logging.getLogger(__name__)

Selector = Callable[[CriteriaSelection], CriteriaSelection]

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


def _identity(selection: CriteriaSelection) -> CriteriaSelection:
    return selection


class BoredApiClient:
    """Async client for the activity suggestion service.

    Pass ``http_client`` to reuse a connection pool; the caller then owns its
    lifecycle. Without one, each call opens and closes its own client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        validate_criteria: bool | None = None,
    ):
        self.base_url = base_url or settings.bored_api_url
        self.http_client = http_client
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.validate_criteria = settings.validate_criteria if validate_criteria is None else validate_criteria

    async def random(self) -> Activity:
        return await self.by_criteria(_identity)

    async def by_criteria(self, selector: Selector) -> Activity:
        selection = selector(CriteriaSelection(validate=self.validate_criteria))
        if not isinstance(selection, CriteriaSelection):
            raise TypeError(f"selector must return a CriteriaSelection, got {type(selection).__name__}")

        payload = await self._request_activity(selection.parameters)
        try:
            activity = decode_activity(payload)
        except ApiError as exc:
            logger.info("[bored-fetch] service error: %s", exc.message)
            raise
        except BadResponse as exc:
            logger.warning("[bored-fetch] malformed response field=%s reason=%s", exc.field, exc.reason)
            raise
        logger.debug("[bored-fetch] decoded activity key=%s type=%s", activity.key, activity.activity_type.value)
        return activity

    async def _request_activity(self, params: dict[str, str]) -> object:
        logger.debug("[bored-fetch] start url=%s params=%s", self.base_url, params)
        if self.http_client is not None:
            return await self._send(self.http_client, params)
        async with httpx.AsyncClient(
            timeout=self.timeout, follow_redirects=True, headers=self._headers()
        ) as client:
            return await self._send(client, params)

    async def _send(self, client: httpx.AsyncClient, params: dict[str, str]) -> object:
        try:
            response = await client.get(self.base_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("[bored-fetch] transport error=%s", exc)
            raise HttpError(str(exc) or type(exc).__name__) from exc

        logger.debug("[bored-fetch] status=%s bytes=%s", response.status_code, len(response.content))
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("[bored-fetch] body is not JSON, status=%s", response.status_code)
            raise HttpError(f"response body is not JSON: {exc}") from exc

    def _headers(self) -> dict[str, str]:
        return {**DEFAULT_HEADERS, "User-Agent": settings.user_agent}
