from typing import Any

import httpx

from bluecanary.logger import init_logger

logger = init_logger(__name__)


class PredictionClient:
    """Synchronous client for a deployed prediction service.

    Requests are issued one at a time. Non-2xx responses raise
    :class:`httpx.HTTPStatusError`.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, http_client: httpx.Client | None = None):
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(base_url=self._base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def health(self) -> httpx.Response:
        response = self._client.get(f"{self._base_url}/health")
        logger.debug(f"GET /health -> {response.status_code}")
        response.raise_for_status()
        return response

    def predict(self, review: str) -> dict[str, Any]:
        response = self._client.post(f"{self._base_url}/predict/", json={"review": review})
        logger.debug(f"POST /predict/ -> {response.status_code}")
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PredictionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
