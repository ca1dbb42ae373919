"""Base model for wire records, flattened composition and tagged unions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    SerializerFunctionWrapHandler,
    Tag,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from aml_models.core.errors import MalformedPayloadError

M = TypeVar("M", bound="WireModel")


class Flatten:
    """``Annotated`` marker for a layer whose fields live at the parent's JSON level.

    A layer is kept as its own attribute in memory::

        class Aks(WireModel):
            compute: Annotated[Compute, Flatten()]
            aks_schema: Annotated[AksSchema, Flatten()] = Field(default_factory=AksSchema)

    but reads from, and writes into, the same JSON object as its parent.
    """

    def __repr__(self) -> str:
        return "Flatten()"


def _is_flattened(metadata: list[Any]) -> bool:
    return any(isinstance(m, Flatten) for m in metadata)


class WireModel(BaseModel):
    """Base for every record exchanged with the service.

    Python names are snake_case, wire names camelCase. Unset optional fields
    and empty collections are left out of the serialized object.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    # Python name of every flattened layer field, in declaration order.
    __flattened__: ClassVar[tuple[str, ...]] = ()
    # Every key (wire alias and Python name) that reads into this model.
    __wire_keys__: ClassVar[frozenset[str]] = frozenset()
    # Serialized key (alias or name) to Python field name.
    __key_to_field__: ClassVar[dict[str, str]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        flattened: list[str] = []
        owner: dict[str, str] = {}
        key_to_field: dict[str, str] = {}

        def claim(key: str, where: str) -> None:
            if key in owner and owner[key] != where:
                raise TypeError(
                    f"{cls.__name__}: key '{key}' is defined by both "
                    f"'{owner[key]}' and '{where}'"
                )
            owner[key] = where

        for name, field in cls.model_fields.items():
            alias = field.alias or name
            key_to_field[alias] = name
            key_to_field[name] = name
            if _is_flattened(field.metadata):
                layer = field.annotation
                if not (isinstance(layer, type) and issubclass(layer, WireModel)):
                    raise TypeError(
                        f"{cls.__name__}.{name}: only WireModel layers can be flattened"
                    )
                flattened.append(name)
                for key in layer.__wire_keys__:
                    claim(key, name)
            else:
                claim(alias, name)
                claim(name, name)

        cls.__flattened__ = tuple(flattened)
        cls.__wire_keys__ = frozenset(owner)
        cls.__key_to_field__ = key_to_field

    @model_validator(mode="before")
    @classmethod
    def _prepare_wire_input(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        # null collections read as empty
        for key in [k for k, v in data.items() if v is None]:
            name = cls.__key_to_field__.get(key)
            if name is not None and cls.model_fields[name].default_factory is not None:
                del data[key]
        for name in cls.__flattened__:
            field = cls.model_fields[name]
            if name in data or (field.alias and field.alias in data):
                continue
            keys = field.annotation.__wire_keys__  # type: ignore[union-attr]
            data[name] = {k: data.pop(k) for k in list(data) if k in keys}
        return data

    @model_serializer(mode="wrap")
    def _serialize_wire(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        out: dict[str, Any] = {}
        for key, value in data.items():
            name = self.__key_to_field__.get(key)
            if name is None:
                out[key] = value
                continue
            if value is None:
                continue
            field = fields[name]
            if field.default_factory is not None and isinstance(value, (list, dict)) and not value:
                continue
            if name in self.__flattened__ and isinstance(value, dict):
                out.update(value)
            else:
                out[key] = value
        return out

    @classmethod
    def from_wire(cls: type[M], payload: Mapping[str, Any] | str | bytes) -> M:
        """Decode a wire payload, raising MalformedPayloadError when it does not fit."""
        try:
            if isinstance(payload, (str, bytes, bytearray)):
                return cls.model_validate_json(payload)
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise MalformedPayloadError.from_validation_error(cls.__name__, exc) from exc

    def to_wire(self) -> dict[str, Any]:
        """The JSON-compatible wire form of this record."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


def _tag_value(model: type[WireModel], data: Mapping[str, Any], tag: str) -> Any:
    """Find the value of wire key *tag* in *data*, also under Python names and layers."""
    if data.get(tag) is not None:
        return data[tag]
    for name, field in model.model_fields.items():
        if (field.alias or name) == tag and data.get(name) is not None:
            return data[name]
    for name in model.__flattened__:
        field = model.model_fields[name]
        layer = field.annotation
        if tag not in layer.__wire_keys__:  # type: ignore[union-attr]
            continue
        nested = data.get(name, data.get(field.alias or name))
        if isinstance(nested, BaseModel):
            nested = dict(nested)
        found = _tag_value(layer, nested if isinstance(nested, Mapping) else data, tag)  # type: ignore[arg-type]
        if found is not None:
            return found
    return None


def tagged_union(
    tag: str,
    *variants: type[WireModel],
    fallback: type[WireModel] | None = None,
) -> Any:
    """Build a union of flattened records selected by the wire key *tag*.

    Each variant declares the wire value it answers to in a ``wire_tag``
    class variable. Wire objects whose tag is not recognised decode as
    *fallback* when one is given; without one they fail to decode.
    """
    by_tag: dict[str, str] = {}
    members = []
    for variant in variants:
        by_tag[variant.wire_tag] = variant.__name__  # type: ignore[attr-defined]
        members.append(Annotated[variant, Tag(variant.__name__)])
    names = {v.__name__ for v in variants}
    if fallback is not None:
        members.append(Annotated[fallback, Tag(fallback.__name__)])
        names.add(fallback.__name__)
    reference = fallback if fallback is not None else variants[0]

    def discriminate(value: Any) -> str | None:
        if isinstance(value, Mapping):
            raw = _tag_value(reference, value, tag)
            if raw is None:
                # let the fallback report the missing tag as a required field
                return fallback.__name__ if fallback is not None else None
            found = by_tag.get(str(getattr(raw, "value", raw)))
            if found is None and fallback is not None:
                return fallback.__name__
            return found
        name = type(value).__name__
        return name if name in names else None

    return Annotated[Union[tuple(members)], Discriminator(discriminate)]
