"""Records shared across resource kinds: errors, identities, SKUs."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.wire import Flatten, WireModel, tagged_union


class ErrorAdditionalInfo(WireModel):
    """The resource management error additional info."""

    type: str | None = None
    info: Any = None


class ErrorDetail(WireModel):
    """The error detail."""

    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[ErrorDetail] = Field(default_factory=list)
    additional_info: list[ErrorAdditionalInfo] = Field(default_factory=list)


class ErrorResponse(WireModel):
    """Common error response for all Azure Resource Manager APIs.

    Returned as the body of a failed request; it is a value, not an
    exception.
    """

    error: ErrorDetail | None = None


class ManagedServiceIdentityType(OpenEnum):
    NONE = "None"
    SYSTEM_ASSIGNED = "SystemAssigned"
    USER_ASSIGNED = "UserAssigned"
    SYSTEM_ASSIGNED_USER_ASSIGNED = "SystemAssigned,UserAssigned"


class UserAssignedIdentity(WireModel):
    principal_id: str | None = None
    client_id: str | None = None


class ManagedServiceIdentity(WireModel):
    """Managed service identity (system assigned and/or user assigned identities)."""

    type: ManagedServiceIdentityType
    principal_id: str | None = None
    tenant_id: str | None = None
    user_assigned_identities: dict[str, UserAssignedIdentity] = Field(default_factory=dict)


class SkuTier(OpenEnum):
    FREE = "Free"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class Sku(WireModel):
    """The resource model definition representing SKU."""

    name: str
    tier: SkuTier | None = None
    size: str | None = None
    family: str | None = None
    capacity: int | None = None


class PartialSku(WireModel):
    """Common SKU definition used in PATCH bodies; every field is optional."""

    capacity: int | None = None
    family: str | None = None
    name: str | None = None
    size: str | None = None
    tier: SkuTier | None = None


class ResourceId(WireModel):
    """Represents a resource ID, e.g. the resource URL of a subnet."""

    id: str


class ArmResourceId(WireModel):
    resource_id: str | None = None


class ResourceBase(WireModel):
    """Description, free-form properties and tags shared by most payloads."""

    description: str | None = None
    properties: dict[str, str | None] = Field(default_factory=dict)
    tags: dict[str, str | None] = Field(default_factory=dict)


class ListViewType(OpenEnum):
    ACTIVE_ONLY = "ActiveOnly"
    ARCHIVED_ONLY = "ArchivedOnly"
    ALL = "All"


class IdentityConfigurationType(OpenEnum):
    """Enum to determine identity framework."""

    MANAGED = "Managed"
    AML_TOKEN = "AMLToken"
    USER_IDENTITY = "UserIdentity"


class IdentityConfiguration(WireModel):
    """Base definition for identity configuration."""

    identity_type: IdentityConfigurationType


class AmlToken(WireModel):
    """AML Token identity configuration."""

    wire_tag: ClassVar[str] = "AMLToken"

    identity_configuration: Annotated[IdentityConfiguration, Flatten()]


class ManagedIdentity(WireModel):
    """Managed identity configuration."""

    wire_tag: ClassVar[str] = "Managed"

    identity_configuration: Annotated[IdentityConfiguration, Flatten()]
    client_id: str | None = None
    object_id: str | None = None
    resource_id: str | None = None


class UserIdentity(WireModel):
    """User identity configuration."""

    wire_tag: ClassVar[str] = "UserIdentity"

    identity_configuration: Annotated[IdentityConfiguration, Flatten()]


IdentityConfigurationUnion = tagged_union(
    "identityType",
    AmlToken,
    ManagedIdentity,
    UserIdentity,
    fallback=IdentityConfiguration,
)
