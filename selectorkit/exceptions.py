"""Exception hierarchy for selectorkit."""


class SelectorKitError(Exception):
    """Base exception for all selectorkit errors."""


class JsonBridgeError(SelectorKitError):
    """Raised when converting between values and JSON text fails."""


class ParseError(JsonBridgeError):
    """Raised when text handed to the JSON bridge is not valid JSON."""


class SerializationError(JsonBridgeError):
    """Raised when a value has no JSON representation (cycles, NaN, unknown objects)."""


class CapabilityError(JsonBridgeError):
    """Raised when parsed data cannot take on the requested capabilities."""


class SelectorError(SelectorKitError):
    """Raised when a compound selector would become invalid."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when an element, id or pseudo-element is added twice."""


class OutOfOrderError(SelectorError):
    """Raised when selector parts are appended out of rank order."""


class ConfigError(SelectorKitError):
    """Raised when configuration is invalid."""
