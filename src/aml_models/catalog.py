"""Name-based lookup of models, tagged unions and enums across all domains."""

from __future__ import annotations

import difflib
import functools
from collections.abc import Mapping
from types import ModuleType
from typing import Annotated, Any, NamedTuple, get_args, get_origin

from pydantic import Discriminator, Tag, TypeAdapter, ValidationError

from aml_models.core import resource
from aml_models.core.enums import OpenEnum
from aml_models.core.errors import MalformedPayloadError, UnknownEnumError, UnknownModelError
from aml_models.core.wire import WireModel
from aml_models.models import (
    common,
    compute,
    datastore,
    endpoint,
    job,
    monitoring,
    registry,
    schedule,
    workspace,
)

DOMAINS: dict[str, ModuleType] = {
    "core": resource,
    "common": common,
    "compute": compute,
    "datastore": datastore,
    "job": job,
    "endpoint": endpoint,
    "monitoring": monitoring,
    "schedule": schedule,
    "workspace": workspace,
    "registry": registry,
}


class Variant(NamedTuple):
    tag: str | None
    model: type[WireModel]


class ModelEntry(NamedTuple):
    """A decodable catalog entry: a model class or a tagged union."""

    name: str
    domain: str
    target: Any

    @property
    def is_union(self) -> bool:
        return not isinstance(self.target, type)

    def variants(self) -> list[Variant]:
        """Members of a tagged union; the fallback member has no tag."""
        if not self.is_union:
            return []
        members = get_args(get_args(self.target)[0])
        found = []
        for member in members:
            model = get_args(member)[0]
            found.append(Variant(getattr(model, "wire_tag", None), model))
        return found

    def decode(self, payload: Mapping[str, Any] | str | bytes) -> Any:
        """Decode *payload* as this entry, raising MalformedPayloadError on failure."""
        if not self.is_union:
            return self.target.from_wire(payload)
        adapter = _adapter(self.name)
        try:
            if isinstance(payload, (str, bytes, bytearray)):
                return adapter.validate_json(payload)
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise MalformedPayloadError.from_validation_error(self.name, exc) from exc


class EnumEntry(NamedTuple):
    name: str
    domain: str
    enum: type[OpenEnum]


def _is_tagged_union(obj: Any) -> bool:
    if get_origin(obj) is not Annotated:
        return False
    return any(isinstance(m, Discriminator) for m in obj.__metadata__) and all(
        isinstance(m, Tag) for member in get_args(get_args(obj)[0]) for m in member.__metadata__
    )


@functools.cache
def _models() -> dict[str, ModelEntry]:
    entries: dict[str, ModelEntry] = {}
    for domain, module in DOMAINS.items():
        for name, obj in vars(module).items():
            if name.startswith("_"):
                continue
            if isinstance(obj, type) and issubclass(obj, WireModel):
                if obj.__module__ == module.__name__ and "[" not in obj.__name__:
                    entries[name] = ModelEntry(name, domain, obj)
            elif _is_tagged_union(obj):
                # unions re-imported by a later domain keep their first domain
                entries.setdefault(name, ModelEntry(name, domain, obj))
    return entries


@functools.cache
def _enums() -> dict[str, EnumEntry]:
    entries: dict[str, EnumEntry] = {}
    for domain, module in DOMAINS.items():
        for name, obj in vars(module).items():
            if isinstance(obj, type) and issubclass(obj, OpenEnum) and obj.__module__ == module.__name__:
                entries[name] = EnumEntry(name, domain, obj)
    return entries


@functools.cache
def _adapter(name: str) -> TypeAdapter[Any]:
    return TypeAdapter(_models()[name].target)


def _lookup(name: str, table: Mapping[str, Any]) -> Any:
    if name in table:
        return table[name]
    folded = {key.lower(): key for key in table}
    if name.lower() in folded:
        return table[folded[name.lower()]]
    return None


def _hint(name: str, candidates: list[str]) -> str:
    matches = difflib.get_close_matches(name, candidates, n=3)
    if not matches:
        return ""
    return " Did you mean: " + ", ".join(matches) + "?"


def _check_domain(domain: str | None) -> None:
    if domain is not None and domain not in DOMAINS:
        raise ValueError(f"Unknown domain '{domain}'. Choose from: {', '.join(DOMAINS)}")


def domains() -> list[str]:
    return list(DOMAINS)


def get_model(name: str) -> ModelEntry:
    """Find a model or tagged union by name (case-insensitive)."""
    entry = _lookup(name, _models())
    if entry is None:
        raise UnknownModelError(f"No model named '{name}'.{_hint(name, list(_models()))}")
    return entry


def get_enum(name: str) -> EnumEntry:
    """Find an open enum by name (case-insensitive)."""
    entry = _lookup(name, _enums())
    if entry is None:
        raise UnknownEnumError(f"No enum named '{name}'.{_hint(name, list(_enums()))}")
    return entry


def list_models(domain: str | None = None) -> list[ModelEntry]:
    _check_domain(domain)
    entries = _models().values()
    return sorted((e for e in entries if domain is None or e.domain == domain), key=lambda e: (e.domain, e.name))


def list_enums(domain: str | None = None) -> list[EnumEntry]:
    _check_domain(domain)
    entries = _enums().values()
    return sorted((e for e in entries if domain is None or e.domain == domain), key=lambda e: (e.domain, e.name))
