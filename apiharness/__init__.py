"""HTTP request wrapper and fixture store for driving an API from test code."""

from .api_client import APIClient, ClientConfig
from .codecs import JSON_CONFIG, JSONAPIClient, decode_json, encode_json
from .config import Config
from .exceptions import (
    ConfigurationError,
    DecodeError,
    HarnessError,
    TransportError,
    UnexpectedResponse,
    UnknownKeyError,
)
from .http_client import HttpClient
from .test_data import FixtureCollection, FixtureRegistry

__all__ = [
    "APIClient",
    "ClientConfig",
    "Config",
    "ConfigurationError",
    "DecodeError",
    "FixtureCollection",
    "FixtureRegistry",
    "HarnessError",
    "HttpClient",
    "JSONAPIClient",
    "JSON_CONFIG",
    "TransportError",
    "UnexpectedResponse",
    "UnknownKeyError",
    "decode_json",
    "encode_json",
]
