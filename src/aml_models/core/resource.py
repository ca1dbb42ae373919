"""ARM resource envelopes around a domain ``properties`` payload."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.wire import WireModel

P = TypeVar("P")


class CreatedByType(OpenEnum):
    """The type of identity that created or last modified a resource."""

    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class SystemData(WireModel):
    """Creation and last-modification audit fields assigned by the service."""

    created_by: str | None = None
    created_by_type: CreatedByType | None = None
    created_at: datetime | None = None
    last_modified_by: str | None = None
    last_modified_by_type: CreatedByType | None = None
    last_modified_at: datetime | None = None


class Resource(WireModel, Generic[P]):
    """Identity metadata plus a kind-specific ``properties`` payload.

    ``id``, ``name``, ``type`` and ``systemData`` are assigned by the service
    and absent from requests built on the client.
    """

    id: str | None = None
    name: str | None = None
    type: str | None = None
    system_data: SystemData | None = None
    properties: P


class TrackedResource(Resource[P], Generic[P]):
    """A resource that lives in a region and carries tags."""

    location: str
    tags: dict[str, str] = Field(default_factory=dict)
