"""HTTP transport used by APIClient, kept separate for dependency injection."""

from typing import Any

import requests


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized HTTP configuration (timeout, optional shared session)

    Error statuses are returned as ordinary responses; deciding what counts
    as a failure is left to the caller.
    """

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None):
        """
        Args:
            timeout: Default request timeout in seconds, used when a call passes none
            session: Optional requests.Session to send through (cookies, adapters)
        """
        self.timeout = timeout
        self._requester: Any = session if session is not None else requests

    def _with_defaults(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        kwargs.setdefault("timeout", self.timeout)
        return kwargs

    def get(self, url: str, headers: dict[str, str] | None = None, **kwargs) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            **kwargs: Additional arguments to pass to requests.get()

        Returns:
            requests.Response object
        """
        return self._requester.get(url, headers=headers, **self._with_defaults(kwargs))

    def delete(
        self, url: str, headers: dict[str, str] | None = None, **kwargs
    ) -> requests.Response:
        """Send a DELETE request. Same arguments as get()."""
        return self._requester.delete(url, headers=headers, **self._with_defaults(kwargs))

    def post(
        self,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a POST request.

        Args:
            url: URL to request
            data: Optional request body (already encoded)
            headers: Optional HTTP headers
            **kwargs: Additional arguments to pass to requests.post()

        Returns:
            requests.Response object
        """
        return self._requester.post(url, data=data, headers=headers, **self._with_defaults(kwargs))

    def put(
        self,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> requests.Response:
        """Send a PUT request. Same arguments as post()."""
        return self._requester.put(url, data=data, headers=headers, **self._with_defaults(kwargs))


# Shared instance used when no transport is injected
default_http_client = HttpClient()
