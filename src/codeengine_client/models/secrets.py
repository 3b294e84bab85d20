"""
Secrets.

The shape of a secret's ``data`` depends on the secret's ``format``;
``decode_secret_data`` picks the model. Unknown formats (and ``generic``)
decode into ``GenericSecretData``, which accepts arbitrary keys.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import ConfigDict, Field, SerializeAsAny, ValidationInfo, field_validator

from codeengine_client.models.base import CodeEngineModel, ListResponse, ResourceModel

SECRET_FORMAT_GENERIC = "generic"
SECRET_FORMAT_BASIC_AUTH = "basic_auth"
SECRET_FORMAT_REGISTRY = "registry"
SECRET_FORMAT_SSH_AUTH = "ssh_auth"
SECRET_FORMAT_TLS = "tls"
SECRET_FORMAT_SERVICE_ACCESS = "service_access"
SECRET_FORMAT_OPERATOR = "operator"


class SecretData(CodeEngineModel):
    """Base class of all secret data shapes."""


class GenericSecretData(SecretData):
    model_config = ConfigDict(extra="allow")


class BasicAuthSecretData(SecretData):
    username: Optional[str] = None
    password: Optional[str] = None


class RegistrySecretData(SecretData):
    username: Optional[str] = None
    password: Optional[str] = None
    server: Optional[str] = None
    email: Optional[str] = None


class SSHSecretData(SecretData):
    ssh_key: Optional[str] = None
    known_hosts: Optional[str] = None


class TLSSecretData(SecretData):
    tls_cert: Optional[str] = None
    tls_key: Optional[str] = None


class ResourceKeyRef(CodeEngineModel):
    id: Optional[str] = None
    name: Optional[str] = None


class RoleRef(CodeEngineModel):
    crn: Optional[str] = None
    name: Optional[str] = None


class ServiceInstanceRef(CodeEngineModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class ServiceIDRef(CodeEngineModel):
    crn: Optional[str] = None
    id: Optional[str] = None


class ServiceAccessSecretData(SecretData):
    resource_key: Optional[ResourceKeyRef] = None
    role: Optional[RoleRef] = None
    service_instance: Optional[ServiceInstanceRef] = None
    serviceid: Optional[ServiceIDRef] = None


class OperatorSecretData(SecretData):
    apikey_id: Optional[str] = None
    resource_group_ids: Optional[List[str]] = None
    serviceid: Optional[ServiceIDRef] = None


SECRET_DATA_MODELS: Dict[str, Type[SecretData]] = {
    SECRET_FORMAT_GENERIC: GenericSecretData,
    SECRET_FORMAT_BASIC_AUTH: BasicAuthSecretData,
    SECRET_FORMAT_REGISTRY: RegistrySecretData,
    SECRET_FORMAT_SSH_AUTH: SSHSecretData,
    SECRET_FORMAT_TLS: TLSSecretData,
    SECRET_FORMAT_SERVICE_ACCESS: ServiceAccessSecretData,
    SECRET_FORMAT_OPERATOR: OperatorSecretData,
}


def decode_secret_data(secret_format: Optional[str], raw: Any) -> SecretData:
    """Decode secret data according to the secret's format."""
    if isinstance(raw, SecretData):
        return raw
    model = SECRET_DATA_MODELS.get(secret_format or "", GenericSecretData)
    return model.model_validate(raw)


class _FormatDispatch(CodeEngineModel):
    format: Optional[str] = Field(None, description="generic, basic_auth, registry, ssh_auth, tls, ...")
    data: Optional[SerializeAsAny[SecretData]] = None

    @field_validator("data", mode="before")
    @classmethod
    def dispatch_data(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return value
        return decode_secret_data(info.data.get("format"), value)


class Secret(ResourceModel, _FormatDispatch):
    service_access: Optional[ServiceAccessSecretData] = None
    service_operator: Optional[OperatorSecretData] = None


class SecretList(ListResponse):
    secrets: Optional[List[Secret]] = None


class SecretPrototype(_FormatDispatch):
    name: str
    format: str


class SecretReplace(_FormatDispatch):
    """Body of a PUT that replaces a secret's data."""

    format: str
