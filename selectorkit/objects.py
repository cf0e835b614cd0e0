"""
Record helpers: a rectangle factory and JSON (de)serialization.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel

from selectorkit.config.options import SerializationOptions
from selectorkit.errors import RecordShapeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Number = Union[int, float]


@dataclass
class Rectangle:
    """Rectangle with width, height and area.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.get_area()
        200
    """

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


def _to_jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(
    obj: Any,
    compact: Optional[bool] = None,
    sort_keys: Optional[bool] = None,
    options: Optional[SerializationOptions] = None,
) -> str:
    """Return the JSON representation of ``obj``.

    Dataclasses and pydantic models are written as objects of their fields,
    at any nesting depth. ``compact`` and ``sort_keys`` override the
    corresponding fields of ``options``.

    Example:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json(Rectangle(10, 20))
        '{"width":10,"height":20}'
    """
    options = options or SerializationOptions()
    overrides = {
        name: value
        for name, value in (("compact", compact), ("sort_keys", sort_keys))
        if value is not None
    }
    if overrides:
        options = options.model_copy(update=overrides)
    return json.dumps(obj, default=_to_jsonable, **options.json_kwargs())


def from_json(shape: type[T], text: Union[str, bytes]) -> T:
    """Build an instance of ``shape`` from a JSON object.

    Pydantic models are validated in JSON mode and report every input
    problem as a ValidationError. Any other class is
    instantiated without calling ``__init__`` and every key of the JSON
    object becomes an attribute, so methods of ``shape`` work on the
    result.

    Args:
        shape: Class of the returned instance.
        text: JSON text holding an object.

    Returns:
        Instance of ``shape``.

    Raises:
        TypeError: If shape is not a class.
        RecordShapeError: If text is not valid JSON or not a JSON object.
        pydantic.ValidationError: If a model rejects the input.
    """
    if not isinstance(shape, type):
        raise TypeError(f"shape must be a class, not {type(shape).__name__}")

    if issubclass(shape, BaseModel):
        return shape.model_validate_json(text)

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RecordShapeError(f"Invalid JSON for {shape.__name__}: {e}") from e

    if not isinstance(data, dict):
        raise RecordShapeError(
            f"{shape.__name__} requires a JSON object, got {type(data).__name__}"
        )

    instance = shape.__new__(shape)
    for key, value in data.items():
        setattr(instance, key, value)

    logger.debug(f"Built {shape.__name__} from JSON keys {list(data)}")
    return instance


__all__ = [
    "Rectangle",
    "get_json",
    "from_json",
]
