"""W3C WebDriver command translation for Figaro."""

from figaro_webdriver.capabilities import DesiredCapabilities, make_w3c_caps
from figaro_webdriver.command import Command, RequestData, RequestMethod, build_request
from figaro_webdriver.connection import build_headers, unwrap, unwrap_list
from figaro_webdriver.errors import (
    DeserializationError,
    HeaderConstructionError,
    MalformedCapabilities,
    RemoteConnectionError,
    WebDriverError,
    WebDriverException,
)
from figaro_webdriver.keys import Key, TypingData
from figaro_webdriver.locator import By
from figaro_webdriver.remote import RemoteConnection
from figaro_webdriver.types import (
    Cookie,
    ElementId,
    ElementRect,
    ElementReference,
    OptionRect,
    ServerStatus,
    SessionId,
    TimeoutConfiguration,
    WindowHandle,
)

__all__ = [
    "By",
    "Command",
    "Cookie",
    "DesiredCapabilities",
    "DeserializationError",
    "ElementId",
    "ElementRect",
    "ElementReference",
    "HeaderConstructionError",
    "Key",
    "MalformedCapabilities",
    "OptionRect",
    "RemoteConnection",
    "RemoteConnectionError",
    "RequestData",
    "RequestMethod",
    "ServerStatus",
    "SessionId",
    "TimeoutConfiguration",
    "TypingData",
    "WebDriverError",
    "WebDriverException",
    "WindowHandle",
    "build_headers",
    "build_request",
    "make_w3c_caps",
    "unwrap",
    "unwrap_list",
]
