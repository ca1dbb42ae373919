"""Datastores and the credentials they are accessed with."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from aml_models.core.enums import OpenEnum
from aml_models.core.paging import PagedResult
from aml_models.core.resource import Resource
from aml_models.core.wire import Flatten, WireModel, tagged_union
from aml_models.models.common import ResourceBase


class DatastoreType(OpenEnum):
    """Enum to determine the datastore contents type."""

    AZURE_BLOB = "AzureBlob"
    AZURE_DATA_LAKE_GEN1 = "AzureDataLakeGen1"
    AZURE_DATA_LAKE_GEN2 = "AzureDataLakeGen2"
    AZURE_FILE = "AzureFile"


class CredentialsType(OpenEnum):
    """Enum to determine the datastore credentials type."""

    ACCOUNT_KEY = "AccountKey"
    CERTIFICATE = "Certificate"
    NONE = "None"
    SAS = "Sas"
    SERVICE_PRINCIPAL = "ServicePrincipal"


class SecretsType(OpenEnum):
    """Enum to determine the datastore secrets type."""

    ACCOUNT_KEY = "AccountKey"
    CERTIFICATE = "Certificate"
    SAS = "Sas"
    SERVICE_PRINCIPAL = "ServicePrincipal"


class ServiceDataAccessAuthIdentity(OpenEnum):
    NONE = "None"
    WORKSPACE_SYSTEM_ASSIGNED_IDENTITY = "WorkspaceSystemAssignedIdentity"
    WORKSPACE_USER_ASSIGNED_IDENTITY = "WorkspaceUserAssignedIdentity"


# -- Secrets ---------------------------------------------------------------------


class DatastoreSecrets(WireModel):
    """Base definition for datastore secrets."""

    secrets_type: SecretsType


class AccountKeyDatastoreSecrets(WireModel):
    """Datastore account key secrets."""

    wire_tag: ClassVar[str] = SecretsType.ACCOUNT_KEY.value

    datastore_secrets: Annotated[DatastoreSecrets, Flatten()]
    key: str | None = None


class CertificateDatastoreSecrets(WireModel):
    """Datastore certificate secrets."""

    wire_tag: ClassVar[str] = SecretsType.CERTIFICATE.value

    datastore_secrets: Annotated[DatastoreSecrets, Flatten()]
    certificate: str | None = None


class SasDatastoreSecrets(WireModel):
    """Datastore SAS secrets."""

    wire_tag: ClassVar[str] = SecretsType.SAS.value

    datastore_secrets: Annotated[DatastoreSecrets, Flatten()]
    sas_token: str | None = None


class ServicePrincipalDatastoreSecrets(WireModel):
    """Datastore Service Principal secrets."""

    wire_tag: ClassVar[str] = SecretsType.SERVICE_PRINCIPAL.value

    datastore_secrets: Annotated[DatastoreSecrets, Flatten()]
    client_secret: str | None = None


DatastoreSecretsUnion = tagged_union(
    "secretsType",
    AccountKeyDatastoreSecrets,
    CertificateDatastoreSecrets,
    SasDatastoreSecrets,
    ServicePrincipalDatastoreSecrets,
    fallback=DatastoreSecrets,
)


# -- Credentials -----------------------------------------------------------------


class DatastoreCredentials(WireModel):
    """Base definition for datastore credentials."""

    credentials_type: CredentialsType


class AccountKeyDatastoreCredentials(WireModel):
    """Account key datastore credentials configuration."""

    wire_tag: ClassVar[str] = CredentialsType.ACCOUNT_KEY.value

    datastore_credentials: Annotated[DatastoreCredentials, Flatten()]
    secrets: AccountKeyDatastoreSecrets


class CertificateDatastoreCredentials(WireModel):
    """Certificate datastore credentials configuration."""

    wire_tag: ClassVar[str] = CredentialsType.CERTIFICATE.value

    datastore_credentials: Annotated[DatastoreCredentials, Flatten()]
    authority_url: str | None = None
    client_id: str
    resource_url: str | None = None
    secrets: CertificateDatastoreSecrets
    tenant_id: str
    thumbprint: str


class NoneDatastoreCredentials(WireModel):
    """Empty/none datastore credentials."""

    wire_tag: ClassVar[str] = CredentialsType.NONE.value

    datastore_credentials: Annotated[DatastoreCredentials, Flatten()]


class SasDatastoreCredentials(WireModel):
    """SAS datastore credentials configuration."""

    wire_tag: ClassVar[str] = CredentialsType.SAS.value

    datastore_credentials: Annotated[DatastoreCredentials, Flatten()]
    secrets: SasDatastoreSecrets


class ServicePrincipalDatastoreCredentials(WireModel):
    """Service Principal datastore credentials configuration."""

    wire_tag: ClassVar[str] = CredentialsType.SERVICE_PRINCIPAL.value

    datastore_credentials: Annotated[DatastoreCredentials, Flatten()]
    authority_url: str | None = None
    client_id: str
    resource_url: str | None = None
    secrets: ServicePrincipalDatastoreSecrets
    tenant_id: str


DatastoreCredentialsUnion = tagged_union(
    "credentialsType",
    AccountKeyDatastoreCredentials,
    CertificateDatastoreCredentials,
    NoneDatastoreCredentials,
    SasDatastoreCredentials,
    ServicePrincipalDatastoreCredentials,
    fallback=DatastoreCredentials,
)


# -- Datastores --------------------------------------------------------------------


class DatastoreProperties(WireModel):
    """Base definition for datastore contents configuration."""

    resource_base: Annotated[ResourceBase, Flatten()] = Field(default_factory=ResourceBase)
    credentials: DatastoreCredentialsUnion
    datastore_type: DatastoreType
    # Read-only.
    is_default: bool | None = None


class AzureDatastore(WireModel):
    """Base definition for Azure datastore contents configuration."""

    resource_group: str | None = None
    subscription_id: str | None = None


class AzureBlobDatastore(WireModel):
    """Azure Blob datastore configuration."""

    wire_tag: ClassVar[str] = DatastoreType.AZURE_BLOB.value

    azure_datastore: Annotated[AzureDatastore, Flatten()] = Field(default_factory=AzureDatastore)
    datastore_properties: Annotated[DatastoreProperties, Flatten()]
    account_name: str | None = None
    container_name: str | None = None
    endpoint: str | None = None
    protocol: str | None = None
    service_data_access_auth_identity: ServiceDataAccessAuthIdentity | None = None


class AzureDataLakeGen1Datastore(WireModel):
    """Azure Data Lake Gen1 datastore configuration."""

    wire_tag: ClassVar[str] = DatastoreType.AZURE_DATA_LAKE_GEN1.value

    azure_datastore: Annotated[AzureDatastore, Flatten()] = Field(default_factory=AzureDatastore)
    datastore_properties: Annotated[DatastoreProperties, Flatten()]
    service_data_access_auth_identity: ServiceDataAccessAuthIdentity | None = None
    store_name: str


class AzureDataLakeGen2Datastore(WireModel):
    """Azure Data Lake Gen2 datastore configuration."""

    wire_tag: ClassVar[str] = DatastoreType.AZURE_DATA_LAKE_GEN2.value

    azure_datastore: Annotated[AzureDatastore, Flatten()] = Field(default_factory=AzureDatastore)
    datastore_properties: Annotated[DatastoreProperties, Flatten()]
    account_name: str
    endpoint: str | None = None
    filesystem: str
    protocol: str | None = None
    service_data_access_auth_identity: ServiceDataAccessAuthIdentity | None = None


class AzureFileDatastore(WireModel):
    """Azure File datastore configuration."""

    wire_tag: ClassVar[str] = DatastoreType.AZURE_FILE.value

    azure_datastore: Annotated[AzureDatastore, Flatten()] = Field(default_factory=AzureDatastore)
    datastore_properties: Annotated[DatastoreProperties, Flatten()]
    account_name: str
    endpoint: str | None = None
    file_share_name: str
    protocol: str | None = None
    service_data_access_auth_identity: ServiceDataAccessAuthIdentity | None = None


DatastorePropertiesUnion = tagged_union(
    "datastoreType",
    AzureBlobDatastore,
    AzureDataLakeGen1Datastore,
    AzureDataLakeGen2Datastore,
    AzureFileDatastore,
    fallback=DatastoreProperties,
)


class Datastore(Resource[DatastorePropertiesUnion]):
    """Azure Resource Manager resource envelope."""


class DatastoreResourceArmPaginatedResult(PagedResult[Datastore]):
    """A paginated list of Datastore entities."""
