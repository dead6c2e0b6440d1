"""JSON encoder/decoder hooks and a ready-made JSON client variant."""

import json
from typing import Any

from .api_client import APIClient, ClientConfig
from .exceptions import DecodeError


def encode_json(data: Any) -> str:
    return json.dumps(data)


def decode_json(body: str | bytes | None) -> Any:
    """
    Parse a JSON response body.

    Empty bodies (204 No Content, bare 201s) decode to None.
    """
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    if not body.strip():
        return None

    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}", raw_body=body) from e


JSON_CONFIG = (
    ClientConfig()
    .with_header("Content-Type", "application/json")
    .with_header("Accept", "application/json")
    .with_encoder(encode_json)
    .with_decoder(decode_json)
)


class JSONAPIClient(APIClient):
    """APIClient that sends and receives JSON"""

    client_config = JSON_CONFIG
