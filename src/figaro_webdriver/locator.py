"""Element locators and their translation to WebDriver selector pairs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Strategy(str, Enum):
    ID = "id"
    NAME = "name"
    CLASS_NAME = "class name"
    TAG = "tag name"
    CSS = "css selector"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"


@dataclass(frozen=True)
class By:
    """A "find by X" request, e.g. ``By.css("#login")``.

    The protocol has no native id, name or class strategy, so those are
    rewritten into CSS selectors. Values are not validated here; a malformed
    selector is reported by the remote end.
    """

    strategy: Strategy
    value: str

    @classmethod
    def id(cls, value: str) -> By:
        return cls(Strategy.ID, value)

    @classmethod
    def name(cls, value: str) -> By:
        return cls(Strategy.NAME, value)

    @classmethod
    def class_name(cls, value: str) -> By:
        return cls(Strategy.CLASS_NAME, value)

    @classmethod
    def tag(cls, value: str) -> By:
        return cls(Strategy.TAG, value)

    @classmethod
    def css(cls, value: str) -> By:
        return cls(Strategy.CSS, value)

    @classmethod
    def xpath(cls, value: str) -> By:
        return cls(Strategy.XPATH, value)

    @classmethod
    def link_text(cls, value: str) -> By:
        return cls(Strategy.LINK_TEXT, value)

    @classmethod
    def partial_link_text(cls, value: str) -> By:
        return cls(Strategy.PARTIAL_LINK_TEXT, value)

    def to_selector(self) -> tuple[str, str]:
        """Return the ``(using, value)`` pair sent in find requests."""
        match self.strategy:
            case Strategy.ID:
                return Strategy.CSS.value, f'[id="{self.value}"]'
            case Strategy.NAME:
                return Strategy.CSS.value, f'[name="{self.value}"]'
            case Strategy.CLASS_NAME:
                return Strategy.CSS.value, f".{self.value}"
            case Strategy.TAG | Strategy.CSS:
                return Strategy.CSS.value, self.value
            case Strategy.XPATH | Strategy.LINK_TEXT | Strategy.PARTIAL_LINK_TEXT:
                return self.strategy.value, self.value

    def to_json(self) -> dict[str, str]:
        using, value = self.to_selector()
        return {"using": using, "value": value}
