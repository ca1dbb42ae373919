"""Introspection helpers over wire models."""

from __future__ import annotations

import types
from typing import Annotated, Any, NamedTuple, Union, get_args, get_origin

from aml_models.core.enums import OpenEnum
from aml_models.core.wire import WireModel


class UnknownEnumValue(NamedTuple):
    path: str
    enum: str
    value: str


class FieldRow(NamedTuple):
    wire_key: str
    attribute: str
    type: str
    required: bool


def type_name(tp: Any) -> str:
    """A short, readable rendering of a field annotation."""
    origin = get_origin(tp)
    if origin is Annotated:
        return type_name(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        return " | ".join(type_name(arg) for arg in get_args(tp))
    if origin is not None:
        args = ", ".join(type_name(arg) for arg in get_args(tp))
        return f"{getattr(origin, '__name__', origin)}[{args}]"
    if tp is type(None):
        return "None"
    if isinstance(tp, type):
        return tp.__name__
    return getattr(tp, "_name", None) or str(tp)


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def find_unknown_enums(value: Any, path: str = "") -> list[UnknownEnumValue]:
    """Every open-enum value in *value* that this package does not document.

    Paths use wire keys, so they point into the JSON the value came from.
    """
    found: list[UnknownEnumValue] = []
    if isinstance(value, OpenEnum):
        if not value.is_known:
            found.append(UnknownEnumValue(path, type(value).__name__, value.value))
    elif isinstance(value, WireModel):
        for name, field in type(value).model_fields.items():
            child = getattr(value, name)
            if name in value.__flattened__:
                found.extend(find_unknown_enums(child, path))
            else:
                found.extend(find_unknown_enums(child, _join(path, field.alias or name)))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            found.extend(find_unknown_enums(item, f"{path}[{index}]"))
    elif isinstance(value, dict):
        for key, item in value.items():
            found.extend(find_unknown_enums(item, _join(path, str(key))))
    return found


def describe_fields(model: type[WireModel], prefix: str = "") -> list[FieldRow]:
    """One row per wire key of *model*, with flattened layers expanded in place."""
    rows: list[FieldRow] = []
    for name, field in model.model_fields.items():
        attribute = _join(prefix, name)
        if name in model.__flattened__:
            rows.extend(describe_fields(field.annotation, attribute))  # type: ignore[arg-type]
            continue
        rows.append(
            FieldRow(
                wire_key=field.alias or name,
                attribute=attribute,
                type=type_name(field.annotation),
                required=field.is_required(),
            )
        )
    return rows
