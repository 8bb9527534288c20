from __future__ import annotations

from typing import Mapping, Optional, Protocol


class MessageResolver(Protocol):
    """Looks up human readable text, e.g. link titles, by message code."""

    def resolve(self, code: str, default: Optional[str] = None) -> Optional[str]:
        ...


class _DefaultsOnly:

    def resolve(self, code: str, default: Optional[str] = None) -> Optional[str]:
        return default

    def __repr__(self) -> str:
        return "DEFAULTS_ONLY"


DEFAULTS_ONLY = _DefaultsOnly()


class StaticMessageResolver:
    """Resolves codes from a fixed mapping, falling back to the default."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages = dict(messages)

    def resolve(self, code: str, default: Optional[str] = None) -> Optional[str]:
        return self._messages.get(code, default)
