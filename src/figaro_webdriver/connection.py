"""Connection headers and response decoding shared by every transport."""

from __future__ import annotations

import base64
import json
import re
import urllib.parse
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .config import get_version
from .errors import DeserializationError, HeaderConstructionError

T = TypeVar("T")

# Visible ASCII and horizontal tab
_HEADER_VALUE = re.compile(r"[\t\x20-\x7e]*")


def default_user_agent() -> str:
    return f"figaro-webdriver/{get_version()} (python)"


def _insert(headers: dict[str, str], name: str, value: str) -> None:
    if not _HEADER_VALUE.fullmatch(value):
        raise HeaderConstructionError(name, "value contains characters not allowed in a header")
    headers[name] = value


def build_headers(remote_server_addr: str, user_agent: str | None = None) -> dict[str, str]:
    """Construct the headers sent with every request to ``remote_server_addr``.

    Basic authentication is added only when the URL carries both a username
    and a password.
    """
    headers: dict[str, str] = {}
    _insert(headers, "Accept", "application/json")
    _insert(headers, "Content-Type", "application/json;charset=UTF-8")
    _insert(headers, "User-Agent", user_agent if user_agent is not None else default_user_agent())

    try:
        parsed = urllib.parse.urlparse(remote_server_addr)
        username, password = parsed.username, parsed.password
    except ValueError as e:
        raise HeaderConstructionError("Authorization", f"cannot parse server URL: {e}") from e
    if username is not None and password is not None:
        credentials = f"{urllib.parse.unquote(username)}:{urllib.parse.unquote(password)}"
        token = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        _insert(headers, "Authorization", f"Basic {token}")

    _insert(headers, "Connection", "keep-alive")
    return headers


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _decode(value: Any, target: Any, shape: Any) -> Any:
    try:
        # Re-encoding gives the validator its own copy and JSON-level strictness.
        raw = json.dumps(value)
        return _adapter(shape).validate_json(raw, strict=True)
    except (TypeError, ValueError, ValidationError) as e:
        raise DeserializationError(target, e) from e


def unwrap(value: Any, target: type[T]) -> T:
    """Decode a JSON value into ``target``."""
    return _decode(value, target, target)


def unwrap_list(value: Any, target: type[T]) -> list[T]:
    """Decode a JSON array into a list of ``target``; fails as a whole."""
    return _decode(value, target, list[target])
