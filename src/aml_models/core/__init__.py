"""Wire codecs shared by every model: records, open enums, envelopes and paging."""

from aml_models.core.enums import OpenEnum
from aml_models.core.errors import (
    AmlModelsError,
    ConfigurationError,
    MalformedPayloadError,
    PagingError,
    UnknownEnumError,
    UnknownModelError,
)
from aml_models.core.paging import AsyncItemPager, Continuable, ItemPager, PagedResult
from aml_models.core.resource import CreatedByType, Resource, SystemData, TrackedResource
from aml_models.core.wire import Flatten, WireModel, tagged_union

__all__ = [
    "AmlModelsError",
    "AsyncItemPager",
    "ConfigurationError",
    "Continuable",
    "CreatedByType",
    "Flatten",
    "ItemPager",
    "MalformedPayloadError",
    "OpenEnum",
    "PagedResult",
    "PagingError",
    "Resource",
    "SystemData",
    "TrackedResource",
    "UnknownEnumError",
    "UnknownModelError",
    "WireModel",
    "tagged_union",
]
