"""WebDriver commands and their translation into HTTP request descriptors.

Every supported operation is a frozen dataclass. ``build_request`` maps each
one onto exactly one (method, URL, body) triple. The mapping is pure: the same
command and session id always give the same ``RequestData``.
"""

from __future__ import annotations

import copy
import urllib.parse
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union, assert_never

from .capabilities import make_w3c_caps
from .keys import TypingData, TypingInput
from .locator import By
from .types import (
    Cookie,
    ElementId,
    OptionRect,
    SessionId,
    TimeoutConfiguration,
    WindowHandle,
    element_reference,
)


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestData:
    """An HTTP request ready to hand to a transport.

    ``url`` is a path to be joined with the server's base URL. ``body`` is
    ``None`` when the endpoint takes no body.
    """

    method: RequestMethod
    url: str
    body: Any = None

    def add_body(self, body: Any) -> RequestData:
        return replace(self, body=body)


# Session


@dataclass(frozen=True)
class NewSession:
    capabilities: Any


@dataclass(frozen=True)
class DeleteSession:
    pass


@dataclass(frozen=True)
class Status:
    pass


@dataclass(frozen=True)
class GetTimeouts:
    pass


@dataclass(frozen=True)
class SetTimeouts:
    timeouts: TimeoutConfiguration


# Navigation


@dataclass(frozen=True)
class NavigateTo:
    url: str


@dataclass(frozen=True)
class GetCurrentUrl:
    pass


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Forward:
    pass


@dataclass(frozen=True)
class Refresh:
    pass


@dataclass(frozen=True)
class GetTitle:
    pass


# Windows and frames


@dataclass(frozen=True)
class GetWindowHandle:
    pass


@dataclass(frozen=True)
class CloseWindow:
    pass


@dataclass(frozen=True)
class SwitchToWindow:
    handle: WindowHandle


@dataclass(frozen=True)
class GetWindowHandles:
    pass


@dataclass(frozen=True)
class SwitchToFrameDefault:
    pass


@dataclass(frozen=True)
class SwitchToFrameNumber:
    index: int


@dataclass(frozen=True)
class SwitchToFrameElement:
    element_id: ElementId


@dataclass(frozen=True)
class SwitchToParentFrame:
    pass


@dataclass(frozen=True)
class GetWindowRect:
    pass


@dataclass(frozen=True)
class SetWindowRect:
    rect: OptionRect


@dataclass(frozen=True)
class MaximizeWindow:
    pass


@dataclass(frozen=True)
class MinimizeWindow:
    pass


@dataclass(frozen=True)
class FullscreenWindow:
    pass


# Elements


@dataclass(frozen=True)
class GetActiveElement:
    pass


@dataclass(frozen=True)
class FindElement:
    by: By


@dataclass(frozen=True)
class FindElements:
    by: By


@dataclass(frozen=True)
class FindElementFromElement:
    element_id: ElementId
    by: By


@dataclass(frozen=True)
class FindElementsFromElement:
    element_id: ElementId
    by: By


@dataclass(frozen=True)
class IsElementSelected:
    element_id: ElementId


@dataclass(frozen=True)
class GetElementAttribute:
    element_id: ElementId
    name: str


@dataclass(frozen=True)
class GetElementProperty:
    element_id: ElementId
    name: str


@dataclass(frozen=True)
class GetElementCssValue:
    element_id: ElementId
    name: str


@dataclass(frozen=True)
class GetElementText:
    element_id: ElementId


@dataclass(frozen=True)
class GetElementTagName:
    element_id: ElementId


@dataclass(frozen=True)
class GetElementRect:
    element_id: ElementId


@dataclass(frozen=True)
class IsElementEnabled:
    element_id: ElementId


@dataclass(frozen=True)
class ElementClick:
    element_id: ElementId


@dataclass(frozen=True)
class ElementClear:
    element_id: ElementId


@dataclass(frozen=True)
class ElementSendKeys:
    element_id: ElementId
    keys: TypingInput

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", TypingData.of(self.keys))


# Document


@dataclass(frozen=True)
class GetPageSource:
    pass


@dataclass(frozen=True)
class ExecuteScript:
    script: str
    args: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ExecuteAsyncScript:
    script: str
    args: list[Any] = field(default_factory=list)


# Cookies


@dataclass(frozen=True)
class GetAllCookies:
    pass


@dataclass(frozen=True)
class GetNamedCookie:
    name: str


@dataclass(frozen=True)
class AddCookie:
    cookie: Cookie


@dataclass(frozen=True)
class DeleteCookie:
    name: str


@dataclass(frozen=True)
class DeleteAllCookies:
    pass


# Actions


@dataclass(frozen=True)
class PerformActions:
    actions: list[Any]


@dataclass(frozen=True)
class ReleaseActions:
    pass


# User prompts


@dataclass(frozen=True)
class DismissAlert:
    pass


@dataclass(frozen=True)
class AcceptAlert:
    pass


@dataclass(frozen=True)
class GetAlertText:
    pass


@dataclass(frozen=True)
class SendAlertText:
    keys: TypingInput

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", TypingData.of(self.keys))


# Screen capture


@dataclass(frozen=True)
class TakeScreenshot:
    pass


@dataclass(frozen=True)
class TakeElementScreenshot:
    element_id: ElementId


Command = Union[
    NewSession,
    DeleteSession,
    Status,
    GetTimeouts,
    SetTimeouts,
    NavigateTo,
    GetCurrentUrl,
    Back,
    Forward,
    Refresh,
    GetTitle,
    GetWindowHandle,
    CloseWindow,
    SwitchToWindow,
    GetWindowHandles,
    SwitchToFrameDefault,
    SwitchToFrameNumber,
    SwitchToFrameElement,
    SwitchToParentFrame,
    GetWindowRect,
    SetWindowRect,
    MaximizeWindow,
    MinimizeWindow,
    FullscreenWindow,
    GetActiveElement,
    FindElement,
    FindElements,
    FindElementFromElement,
    FindElementsFromElement,
    IsElementSelected,
    GetElementAttribute,
    GetElementProperty,
    GetElementCssValue,
    GetElementText,
    GetElementTagName,
    GetElementRect,
    IsElementEnabled,
    ElementClick,
    ElementClear,
    ElementSendKeys,
    GetPageSource,
    ExecuteScript,
    ExecuteAsyncScript,
    GetAllCookies,
    GetNamedCookie,
    AddCookie,
    DeleteCookie,
    DeleteAllCookies,
    PerformActions,
    ReleaseActions,
    DismissAlert,
    AcceptAlert,
    GetAlertText,
    SendAlertText,
    TakeScreenshot,
    TakeElementScreenshot,
]


def _get(url: str) -> RequestData:
    return RequestData(RequestMethod.GET, url)


def _post(url: str, body: Any | None = None) -> RequestData:
    # POST endpoints always need a well-formed JSON body, even an empty one.
    return RequestData(RequestMethod.POST, url, {} if body is None else body)


def _delete(url: str) -> RequestData:
    return RequestData(RequestMethod.DELETE, url)


def _segment(name: str) -> str:
    # Names are caller supplied; "/" or "?" must not change the route.
    return urllib.parse.quote(name, safe="")


def _keys_body(keys: TypingData) -> dict[str, Any]:
    return {"text": keys.text, "value": keys.value}


def _script_body(script: str, args: list[Any]) -> dict[str, Any]:
    return {"script": script, "args": copy.deepcopy(list(args))}


def build_request(command: Command, session_id: SessionId) -> RequestData:
    """Translate a command into the request the remote end expects.

    Raises:
        MalformedCapabilities: for ``NewSession`` when the capabilities are
            not a JSON object. No other command can fail.
    """
    session = f"/session/{session_id}"

    match command:
        case NewSession(capabilities):
            w3c_caps = make_w3c_caps(capabilities)
            return _post(
                "/session",
                {
                    "capabilities": w3c_caps,
                    "desiredCapabilities": copy.deepcopy(capabilities),
                },
            )
        case DeleteSession():
            return _delete(session)
        case Status():
            return _get("/status")
        case GetTimeouts():
            return _get(f"{session}/timeouts")
        case SetTimeouts(timeouts):
            return _post(f"{session}/timeouts", timeouts.to_json())

        case NavigateTo(url):
            return _post(f"{session}/url", {"url": url})
        case GetCurrentUrl():
            return _get(f"{session}/url")
        case Back():
            return _post(f"{session}/back")
        case Forward():
            return _post(f"{session}/forward")
        case Refresh():
            return _post(f"{session}/refresh")
        case GetTitle():
            return _get(f"{session}/title")

        case GetWindowHandle():
            return _get(f"{session}/window")
        case CloseWindow():
            return _delete(f"{session}/window")
        case SwitchToWindow(handle):
            return _post(f"{session}/window", {"handle": str(handle)})
        case GetWindowHandles():
            return _get(f"{session}/window/handles")
        case SwitchToFrameDefault():
            return _post(f"{session}/frame", {"id": None})
        case SwitchToFrameNumber(index):
            return _post(f"{session}/frame", {"id": index})
        case SwitchToFrameElement(element_id):
            return _post(f"{session}/frame", {"id": element_reference(element_id)})
        case SwitchToParentFrame():
            return _post(f"{session}/frame/parent")
        case GetWindowRect():
            return _get(f"{session}/window/rect")
        case SetWindowRect(rect):
            return _post(f"{session}/window/rect", rect.to_json())
        case MaximizeWindow():
            return _post(f"{session}/window/maximize")
        case MinimizeWindow():
            return _post(f"{session}/window/minimize")
        case FullscreenWindow():
            return _post(f"{session}/window/fullscreen")

        case GetActiveElement():
            return _get(f"{session}/element/active")
        case FindElement(by):
            return _post(f"{session}/element", by.to_json())
        case FindElements(by):
            return _post(f"{session}/elements", by.to_json())
        case FindElementFromElement(element_id, by):
            return _post(f"{session}/element/{element_id}/element", by.to_json())
        case FindElementsFromElement(element_id, by):
            return _post(f"{session}/element/{element_id}/elements", by.to_json())
        case IsElementSelected(element_id):
            return _get(f"{session}/element/{element_id}/selected")
        case GetElementAttribute(element_id, name):
            return _get(f"{session}/element/{element_id}/attribute/{_segment(name)}")
        case GetElementProperty(element_id, name):
            return _get(f"{session}/element/{element_id}/property/{_segment(name)}")
        case GetElementCssValue(element_id, name):
            return _get(f"{session}/element/{element_id}/css/{_segment(name)}")
        case GetElementText(element_id):
            return _get(f"{session}/element/{element_id}/text")
        case GetElementTagName(element_id):
            return _get(f"{session}/element/{element_id}/name")
        case GetElementRect(element_id):
            return _get(f"{session}/element/{element_id}/rect")
        case IsElementEnabled(element_id):
            return _get(f"{session}/element/{element_id}/enabled")
        case ElementClick(element_id):
            return _post(f"{session}/element/{element_id}/click")
        case ElementClear(element_id):
            return _post(f"{session}/element/{element_id}/clear")
        case ElementSendKeys(element_id, keys):
            return _post(f"{session}/element/{element_id}/value", _keys_body(keys))

        case GetPageSource():
            return _get(f"{session}/source")
        case ExecuteScript(script, args):
            return _post(f"{session}/execute/sync", _script_body(script, args))
        case ExecuteAsyncScript(script, args):
            return _post(f"{session}/execute/async", _script_body(script, args))

        case GetAllCookies():
            return _get(f"{session}/cookie")
        case GetNamedCookie(name):
            return _get(f"{session}/cookie/{_segment(name)}")
        case AddCookie(cookie):
            return _post(f"{session}/cookie", {"cookie": cookie.to_json()})
        case DeleteCookie(name):
            return _delete(f"{session}/cookie/{_segment(name)}")
        case DeleteAllCookies():
            return _delete(f"{session}/cookie")

        case PerformActions(actions):
            return _post(f"{session}/actions", {"actions": copy.deepcopy(list(actions))})
        case ReleaseActions():
            return _delete(f"{session}/actions")

        case DismissAlert():
            return _post(f"{session}/alert/dismiss")
        case AcceptAlert():
            return _post(f"{session}/alert/accept")
        case GetAlertText():
            return _get(f"{session}/alert/text")
        case SendAlertText(keys):
            return _post(f"{session}/alert/text", _keys_body(keys))

        case TakeScreenshot():
            return _get(f"{session}/screenshot")
        case TakeElementScreenshot(element_id):
            return _get(f"{session}/element/{element_id}/screenshot")

        case _:
            assert_never(command)
