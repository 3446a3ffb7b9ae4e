"""Shared HTTP plumbing for the REST API clients."""

import logging
from enum import Enum
from typing import Any

import requests

from ..config import HTTP_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """A remote API call failed (network, HTTP status or payload)."""

    def __init__(self, message: str, url: str | None = None, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class ErrorPolicy(str, Enum):
    """What a client does when a call fails."""

    DEFAULT = "default"  # log and return the operation's fallback value
    RAISE = "raise"  # log and re-raise ServiceError


class ApiClient:
    """
    Base class for JSON-over-HTTP clients.

    Subclasses set `service_name`, `base_url` and `error_policy`, and route
    failures through `_handle_failure` so the policy is applied in one place.
    """

    service_name = "api"
    base_url = ""
    error_policy = ErrorPolicy.DEFAULT

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT,
        error_policy: ErrorPolicy | None = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Override the endpoint from config
            session: requests session to reuse (a new one is created if None)
            timeout: Per-request timeout in seconds
            error_policy: Override the class default failure policy
        """
        if base_url:
            self.base_url = base_url
        if error_policy is not None:
            self.error_policy = ErrorPolicy(error_policy)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET url and decode the JSON body, raising ServiceError on any failure."""
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ServiceError(f"{self.service_name} request failed: {e}", url=url) from e

        if not response.ok:
            raise ServiceError(
                f"{self.service_name} returned HTTP {response.status_code}",
                url=url,
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(
                f"{self.service_name} returned invalid JSON", url=url, status=response.status_code
            ) from e

    def _handle_failure(self, error: ServiceError, default: Any) -> Any:
        """Log a failed call, then return default or re-raise according to policy."""
        logger.error("%s error: %s", self.service_name, error)
        if self.error_policy is ErrorPolicy.RAISE:
            raise error
        return default

    def close(self) -> None:
        self.session.close()
