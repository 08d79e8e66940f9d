import logging

import httpx

from hostel_web.exceptions.custom import HostelApiError, RateLimitError

logger = logging.getLogger(__name__)


class HostelApiService:
    """Shared plumbing for calls to the hostel REST backend.

    The client is expected to carry the backend base URL, so paths are
    relative. Transport failures surface as HostelApiError without a status.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise HostelApiError(str(exc) or exc.__class__.__name__) from exc

        if resp.status_code == 429:
            raise RateLimitError("Hostel API")
        if resp.status_code >= 400:
            raise HostelApiError(resp.text, status_code=resp.status_code)
        return resp

    @staticmethod
    def _json_list(resp: httpx.Response) -> list:
        """Body as a list; any other shape (or invalid JSON) degrades to []."""
        try:
            data = resp.json()
        except ValueError:
            return []
        return data if isinstance(data, list) else []

    @classmethod
    def _json_records(cls, resp: httpx.Response) -> list[dict]:
        """Object items of a list body; anything else in the array is skipped."""
        return [item for item in cls._json_list(resp) if isinstance(item, dict)]

    @staticmethod
    def _json_object(resp: httpx.Response) -> dict:
        """Body as a JSON object; a 2xx reply of any other shape is a backend error."""
        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            logger.error("Unexpected response body: %r", resp.text[:200])
            raise HostelApiError("Unexpected response body from hostel API")
        return data
