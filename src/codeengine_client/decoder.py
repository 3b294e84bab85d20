"""
Decoding raw JSON into models, and encoding models back into JSON.

Decoding goes through pydantic ``TypeAdapter`` so the same function handles
plain models, lists of models and discriminated unions. Validation errors
become ``DecodeError`` carrying the dotted path of the offending field.
"""

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from codeengine_client.exceptions import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _field_path(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def decode(raw: Any, target: Type[T]) -> T:
    """
    Decode ``raw`` JSON data into ``target``.

    Missing fields are left unset, ``null`` becomes ``None``; a present
    field of the wrong type fails.

    Args:
        raw: Decoded JSON (dict, list, ...)
        target: Model class or type expression to decode into

    Returns:
        The decoded value

    Raises:
        DecodeError: If a present field has the wrong shape
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(raw)
        return _adapter(target).validate_python(raw)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_path = _field_path(tuple(first.get("loc", ())))
        expected = first.get("type")
        target_name = getattr(target, "__name__", repr(target))
        raise DecodeError(
            f"Failed to decode {target_name}: {field_path or '<root>'}: {first.get('msg')}",
            field_path=field_path or None,
            expected=expected,
            details={"errors": e.errors(include_url=False)},
        ) from e


def encode(model: Any) -> Any:
    """
    Encode a model for a request body.

    Only fields the caller set are emitted; a field explicitly set to
    ``None`` is sent as ``null``.
    """
    if isinstance(model, BaseModel):
        return model.model_dump(mode="json", exclude_unset=True)
    if isinstance(model, list):
        return [encode(item) for item in model]
    return model
