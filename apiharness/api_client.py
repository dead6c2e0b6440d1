"""
API client for driving the application under test over HTTP

An APIClient composes headers, encodes request bodies, dispatches through an
injected transport and decodes successful responses. Anything outside 2xx is
raised as UnexpectedResponse.

Variants are declared by subclassing and extending the parent's ClientConfig:

    class WidgetAPI(JSONAPIClient):
        client_config = JSONAPIClient.client_config.with_header("X-Api-Key", "secret")

        def create_widget(self, name):
            return self.post("/widgets", {"name": name})
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, ClassVar, Protocol
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

import requests

from .exceptions import TransportError, UnexpectedResponse
from .http_client import default_http_client
from .logging_config import get_module_logger

logger = get_module_logger("api_client")

QUERYSTRING_VERBS = frozenset({"GET", "DELETE"})
BODY_VERBS = frozenset({"POST", "PUT"})
SUCCESS_STATUS_CODES = range(200, 300)


class AppConfiguration(Protocol):
    """Anything that can tell the client where the application lives."""

    @property
    def app_host(self) -> str: ...


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable request configuration shared by every instance of a client variant.

    Every with_* method returns a new ClientConfig and leaves the receiver
    untouched, so a derived variant can extend its parent's configuration
    without affecting it.
    """

    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    encoder: Callable[[Any], Any] | None = None
    decoder: Callable[[Any], Any] | None = None

    def __post_init__(self):
        # Snapshot so later changes to the caller's mapping cannot reach us
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def with_header(self, name: str, value: str) -> "ClientConfig":
        """Declare a global header. Redeclaring a name replaces its value in place."""
        headers = dict(self.headers)
        headers[name] = value
        return replace(self, headers=MappingProxyType(headers))

    def with_headers(self, headers: Mapping[str, str]) -> "ClientConfig":
        result = self
        for name, value in headers.items():
            result = result.with_header(name, value)
        return result

    def with_encoder(self, encoder: Callable[[Any], Any]) -> "ClientConfig":
        return replace(self, encoder=encoder)

    def with_decoder(self, decoder: Callable[[Any], Any]) -> "ClientConfig":
        return replace(self, decoder=decoder)

    def merged_headers(self, call_headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """
        Build the headers for one request.

        Call headers override global headers of the same name. Names are
        matched exactly as given. The result is always a fresh dict.
        """
        headers = dict(self.headers)
        if call_headers:
            headers.update(call_headers)
        return headers

    def encode(self, data: Any) -> Any:
        if self.encoder is None:
            return data
        return self.encoder(data)

    def decode(self, body: Any) -> Any:
        if self.decoder is None:
            return body
        return self.decoder(body)


def append_querystring(path: str, data: Any) -> str:
    """
    Serialize data as a querystring and append it to path.

    Pairs keep the iteration order of data. Sequence values become repeated
    parameters (``{"id": [1, 2]}`` -> ``id=1&id=2``).
    """
    if data is None:
        return path

    query = urlencode(data, doseq=True)
    if not query:
        return path

    scheme, netloc, url_path, existing, fragment = urlsplit(path)
    if existing:
        query = f"{existing}&{query}"
    return urlunsplit((scheme, netloc, url_path, query, fragment))


class APIClient:
    """
    HTTP request wrapper bound to one application host.

    The transport must expose get/delete(url, headers=...) and
    post/put(url, data=..., headers=...) returning objects with
    ``status_code`` and ``text``. HttpClient is the default.
    """

    client_config: ClassVar[ClientConfig] = ClientConfig()

    def __init__(
        self,
        configuration: AppConfiguration,
        transport: Any | None = None,
        client_config: ClientConfig | None = None,
    ):
        """
        Args:
            configuration: Object exposing ``app_host`` (read once, here)
            transport: HTTP transport (optional, defaults to the shared HttpClient)
            client_config: Replaces the class-level configuration for this instance
        """
        self.base_url = configuration.app_host
        self.transport = transport if transport is not None else default_http_client
        self._client_config = (
            client_config if client_config is not None else type(self).client_config
        )

    def get(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("GET", path, data, headers)

    def post(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("POST", path, data, headers)

    def put(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("PUT", path, data, headers)

    def delete(self, path: str, data: Any = None, headers: Mapping[str, str] | None = None) -> Any:
        return self.request("DELETE", path, data, headers)

    def request(
        self,
        verb: str,
        path: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Issue one HTTP request and return the decoded response body.

        Args:
            verb: GET, POST, PUT or DELETE (case-insensitive)
            path: URL suffix, resolved against the application host
            data: Querystring pairs for GET/DELETE, body payload for POST/PUT
            headers: Headers for this call only, overriding global headers

        Returns:
            The response body, passed through the decoder if one is configured

        Raises:
            UnexpectedResponse: The application answered outside 2xx
            TransportError: No response was received
        """
        verb = verb.upper()
        if verb not in QUERYSTRING_VERBS and verb not in BODY_VERBS:
            raise ValueError(f"Unsupported HTTP verb: {verb}")

        effective_headers = self._client_config.merged_headers(headers)
        kwargs: dict[str, Any] = {"headers": effective_headers}

        if verb in QUERYSTRING_VERBS:
            url = self.url_for(append_querystring(path, data))
        else:
            url = self.url_for(path)
            # None means "no body"; the encoder never sees it
            kwargs["data"] = None if data is None else self._client_config.encode(data)

        logger.debug(f"{verb} {url}")
        send = getattr(self.transport, verb.lower())

        try:
            response = send(url, **kwargs)
        except requests.exceptions.RequestException as e:
            # HTTPError, TooManyRedirects and friends may carry the response
            if e.response is None:
                raise TransportError(verb, url, str(e)) from e
            raise UnexpectedResponse(verb, url, e.response.status_code, e.response.text) from e

        logger.debug(f"{verb} {url} -> HTTP {response.status_code}")

        if response.status_code not in SUCCESS_STATUS_CODES:
            raise UnexpectedResponse(verb, url, response.status_code, response.text)

        return self._client_config.decode(response.text)

    def url_for(self, path: str) -> str:
        """Resolve path against the application host."""
        return urljoin(self.base_url, path)
