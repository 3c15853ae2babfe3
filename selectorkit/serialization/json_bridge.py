"""Convert values to JSON text and back, reattaching behaviour on the way in."""

from __future__ import annotations

import functools
import json
import math
import types
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel

from selectorkit.config.settings import get_settings
from selectorkit.exceptions import CapabilityError, ParseError, SerializationError

logger = structlog.get_logger(__name__)


def _null_non_finite(value: Any, active: set[int]) -> Any:
    """Copy containers, replacing NaN and infinities with None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value
    if id(value) in active:
        msg = "Circular reference detected"
        raise ValueError(msg)
    active.add(id(value))
    try:
        if isinstance(value, dict):
            return {key: _null_non_finite(item, active) for key, item in value.items()}
        return [_null_non_finite(item, active) for item in value]
    finally:
        active.discard(id(value))


def _encode_object(value: Any, *, allow_nan: bool) -> Any:
    """Fallback encoder for values json does not handle natively."""
    if isinstance(value, BaseModel):
        data = {**value.model_dump(mode="json"), **(value.model_extra or {})}
    elif (
        hasattr(value, "__dict__")
        and not callable(value)
        and not isinstance(value, types.ModuleType)
    ):
        data = vars(value)
    else:
        msg = f"Object of type {type(value).__name__} is not JSON serializable"
        raise TypeError(msg)
    return data if allow_nan else _null_non_finite(data, set())


def to_text(value: Any) -> str:
    """Return the compact JSON representation of ``value``.

    Key order follows insertion order, e.g. ``[1, 2, 3]`` becomes ``'[1,2,3]'``
    and ``{"width": 10, "height": 20}`` becomes ``'{"width":10,"height":20}'``.
    NaN and infinities become ``null`` unless ``json_allow_nan`` is set.
    """
    settings = get_settings()
    try:
        if not settings.json_allow_nan:
            value = _null_non_finite(value, set())
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=settings.json_ensure_ascii,
            allow_nan=settings.json_allow_nan,
            default=functools.partial(_encode_object, allow_nan=settings.json_allow_nan),
        )
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("json_serialize_failed", value_type=type(value).__name__, error=str(e))
        raise SerializationError(str(e)) from e


def _attach_to_model(cls: type[BaseModel], data: dict[str, Any]) -> BaseModel:
    # Bypasses validation and defaults so the instance holds exactly ``data``
    obj = cls.__new__(cls)
    declared = {key: item for key, item in data.items() if key in cls.model_fields}
    extra = {key: item for key, item in data.items() if key not in cls.model_fields}
    object.__setattr__(obj, "__dict__", declared)
    object.__setattr__(obj, "__pydantic_extra__", extra)
    object.__setattr__(obj, "__pydantic_fields_set__", set(declared))
    object.__setattr__(obj, "__pydantic_private__", None)
    return obj


def _attach_to_class(cls: type, data: dict[str, Any]) -> Any:
    try:
        obj = cls.__new__(cls)
    except TypeError as e:
        msg = f"Cannot create {cls.__name__} without its constructor: {e}"
        raise CapabilityError(msg) from e
    if not hasattr(obj, "__dict__"):
        msg = f"{cls.__name__} instances cannot hold arbitrary fields"
        raise CapabilityError(msg)
    obj.__dict__.update(data)
    return obj


def from_text(capabilities: Any, text: str) -> Any:
    """Parse ``text`` and give the resulting object the behaviour of ``capabilities``.

    ``capabilities`` may be a class, an instance of one, a mapping of method
    names to functions (each taking the object as first argument) or None.
    A parsed JSON object becomes an object holding exactly the parsed fields as
    attributes, on which every capability can be called. Class constructors are
    not run and the fields are not checked. Arrays and scalars are returned as
    parsed.

    Usage::

        circle = from_text(Circle, '{"radius":10}')
        circle.get_area()
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("json_parse_failed", line=e.lineno, column=e.colno, error=e.msg)
        msg = f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
        raise ParseError(msg) from e

    if not isinstance(data, dict):
        logger.debug("capabilities_skipped", data_type=type(data).__name__)
        return data

    if capabilities is None:
        return types.SimpleNamespace(**data)
    if isinstance(capabilities, Mapping):
        cls: type = type("Capabilities", (), dict(capabilities))
    elif isinstance(capabilities, type):
        cls = capabilities
    else:
        cls = type(capabilities)

    if issubclass(cls, BaseModel):
        obj = _attach_to_model(cls, data)
    else:
        obj = _attach_to_class(cls, data)
    logger.debug("capabilities_attached", capabilities=cls.__name__, fields=len(data))
    return obj
