"""
Error types for hxui component rendering and configuration.
"""

from __future__ import annotations


class HxUIError(Exception):
    """Base exception for all hxui errors."""

    def __init__(self, message: str, *, component: str | None = None):
        self.message = message
        self.component = component
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Prefix the message with the component name if known."""
        if self.component:
            return f"{self.component}: {self.message}"
        return self.message


class ComponentConfigError(HxUIError):
    """
    Raised when a component is declared in a way that can never render.

    Examples:
    - A non-Enum type passed as an enum option source
    - An unknown ``data_type`` declared on a bound model field
    """

    pass


class UrlSynthesisError(HxUIError):
    """
    Raised by a URL synthesizer that cannot build a URL.

    The attribute resolver catches this and omits the directive; it never
    escapes a render call.
    """

    def __init__(self, message: str, *, route: str | None = None):
        self.route = route
        super().__init__(message)


class ConfigError(HxUIError):
    """
    Raised when hxui options cannot be loaded.

    Examples:
    - Malformed TOML
    - An option with the wrong type
    """

    pass
