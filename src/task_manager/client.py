"""HTTP client used by the Streamlit UI to talk to the task store API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from . import config

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """Raised when a request to the task API fails for any reason."""
    pass


class TaskApiClient:
    """Thin wrapper over requests for the /tasks endpoints.

    Transport errors, non-2xx responses and undecodable bodies are all
    reported as TaskApiError; callers do not distinguish between them.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or config.TASK_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.TASK_API_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, json=json, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            raise TaskApiError(f"{method} {url} failed: {e}") from e

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/tasks")

    def create_task(self, title: str) -> Dict[str, Any]:
        return self._request("POST", "/tasks", json={"title": title})

    def update_task(self, task_id: str, **fields: Any) -> Dict[str, Any]:
        return self._request("PUT", f"/tasks/{task_id}", json=fields)

    def delete_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/tasks/{task_id}")
