"""Capability negotiation between the legacy and W3C session dialects."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from .errors import MalformedCapabilities

W3C_CAPABILITY_NAMES = frozenset(
    {
        "acceptInsecureCerts",
        "browserName",
        "browserVersion",
        "platformName",
        "pageLoadStrategy",
        "proxy",
        "setWindowRect",
        "timeouts",
        "unhandledPromptBehavior",
        "strictFileInteractability",
    }
)

# Legacy capability name -> W3C capability name
LEGACY_TO_W3C = {
    "acceptSslCerts": "acceptInsecureCerts",
    "version": "browserVersion",
    "platform": "platformName",
}


def make_w3c_caps(capabilities: Any) -> dict[str, Any]:
    """Derive the W3C ``capabilities`` object from a legacy capabilities document.

    Standard W3C names and vendor extensions (``vendor:option``) are copied
    into ``alwaysMatch``; legacy names with a set value are renamed to their
    W3C equivalent. The input is not modified.

    Raises:
        MalformedCapabilities: if the document is not a JSON object.
    """
    if not isinstance(capabilities, Mapping):
        raise MalformedCapabilities(
            f"Capabilities must be a JSON object, got {type(capabilities).__name__}"
        )

    caps = copy.deepcopy(dict(capabilities))
    proxy = caps.get("proxy")
    if isinstance(proxy, dict) and isinstance(proxy.get("proxyType"), str):
        proxy["proxyType"] = proxy["proxyType"].lower()

    always_match: dict[str, Any] = {}
    for key, value in caps.items():
        if not isinstance(key, str):
            raise MalformedCapabilities(f"Capability names must be strings, got {key!r}")
        if value and key in LEGACY_TO_W3C:
            if key == "platform" and isinstance(value, str):
                value = value.lower()
            always_match[LEGACY_TO_W3C[key]] = value
        if key in W3C_CAPABILITY_NAMES or ":" in key:
            always_match[key] = caps[key]

    return {"firstMatch": [{}], "alwaysMatch": always_match}


class DesiredCapabilities:
    """Starting capability documents for the common browsers.

    Each call returns a new dict, so callers may extend it freely.
    """

    @staticmethod
    def chrome() -> dict[str, Any]:
        return {"browserName": "chrome", "version": "", "platform": "ANY"}

    @staticmethod
    def firefox() -> dict[str, Any]:
        return {
            "browserName": "firefox",
            "acceptInsecureCerts": True,
            "marionette": True,
        }

    @staticmethod
    def edge() -> dict[str, Any]:
        return {"browserName": "MicrosoftEdge", "version": "", "platform": "ANY"}

    @staticmethod
    def safari() -> dict[str, Any]:
        return {"browserName": "safari", "version": "", "platform": "MAC"}

    @staticmethod
    def internet_explorer() -> dict[str, Any]:
        return {"browserName": "internet explorer", "version": "", "platform": "WINDOWS"}

    @staticmethod
    def opera() -> dict[str, Any]:
        return {"browserName": "opera", "version": "", "platform": "ANY"}

    @staticmethod
    def htmlunit() -> dict[str, Any]:
        return {"browserName": "htmlunit", "version": "", "platform": "ANY"}
