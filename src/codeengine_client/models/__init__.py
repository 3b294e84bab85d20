"""
Request and response models for the Code Engine API.

Every response field is optional; use ``model.is_set(name)`` to tell an
absent field from an explicit ``null``.
"""

from codeengine_client.models.base import (
    CodeEngineModel,
    ComponentRef,
    EnvVar,
    ListResponse,
    PaginationListFirstMetadata,
    PaginationListNextMetadata,
    ProbeSettings,
    ResourceModel,
    RunSpec,
    VolumeMount,
)
from codeengine_client.models.projects import (
    Project,
    ProjectEgressIPAddresses,
    ProjectList,
    ProjectPrototype,
    ProjectStatusDetails,
)
from codeengine_client.models.reclamations import Reclamation, ReclamationList
from codeengine_client.models.allowed_outbound_destinations import (
    AllowedOutboundDestination,
    AllowedOutboundDestinationCidrBlockData,
    AllowedOutboundDestinationList,
    AllowedOutboundDestinationPatch,
    AllowedOutboundDestinationPatchCidrBlockData,
    AllowedOutboundDestinationPrototype,
    AllowedOutboundDestinationPrototypeCidrBlockData,
    UnknownAllowedOutboundDestination,
    UnknownAllowedOutboundDestinationPatch,
    UnknownAllowedOutboundDestinationPrototype,
)
from codeengine_client.models.apps import (
    App,
    AppInstance,
    AppInstanceList,
    AppList,
    AppPatch,
    AppPrototype,
    AppRevision,
    AppRevisionList,
    AppRevisionStatus,
    AppStatus,
    ContainerStatus,
)
from codeengine_client.models.jobs import (
    Job,
    JobList,
    JobPatch,
    JobPrototype,
    JobRun,
    JobRunList,
    JobRunPrototype,
    JobRunStatus,
)
from codeengine_client.models.builds import (
    Build,
    BuildList,
    BuildPatch,
    BuildPrototype,
    BuildRun,
    BuildRunList,
    BuildRunPrototype,
    BuildRunStatus,
    BuildStatus,
)
from codeengine_client.models.secrets import (
    BasicAuthSecretData,
    GenericSecretData,
    OperatorSecretData,
    RegistrySecretData,
    ResourceKeyRef,
    RoleRef,
    Secret,
    SecretData,
    SecretList,
    SecretPrototype,
    SecretReplace,
    ServiceAccessSecretData,
    ServiceIDRef,
    ServiceInstanceRef,
    SSHSecretData,
    TLSSecretData,
    decode_secret_data,
)
from codeengine_client.models.bindings import Binding, BindingList, BindingPrototype
from codeengine_client.models.config_maps import (
    ConfigMap,
    ConfigMapList,
    ConfigMapPrototype,
    ConfigMapReplace,
)
from codeengine_client.models.domain_mappings import (
    DomainMapping,
    DomainMappingList,
    DomainMappingPatch,
    DomainMappingPrototype,
    DomainMappingStatus,
)

__all__ = [
    # Base
    "CodeEngineModel",
    "ComponentRef",
    "EnvVar",
    "ListResponse",
    "PaginationListFirstMetadata",
    "PaginationListNextMetadata",
    "ProbeSettings",
    "ResourceModel",
    "RunSpec",
    "VolumeMount",
    # Projects
    "Project",
    "ProjectEgressIPAddresses",
    "ProjectList",
    "ProjectPrototype",
    "ProjectStatusDetails",
    "Reclamation",
    "ReclamationList",
    # Allowed outbound destinations
    "AllowedOutboundDestination",
    "AllowedOutboundDestinationCidrBlockData",
    "AllowedOutboundDestinationList",
    "AllowedOutboundDestinationPatch",
    "AllowedOutboundDestinationPatchCidrBlockData",
    "AllowedOutboundDestinationPrototype",
    "AllowedOutboundDestinationPrototypeCidrBlockData",
    "UnknownAllowedOutboundDestination",
    "UnknownAllowedOutboundDestinationPatch",
    "UnknownAllowedOutboundDestinationPrototype",
    # Apps
    "App",
    "AppInstance",
    "AppInstanceList",
    "AppList",
    "AppPatch",
    "AppPrototype",
    "AppRevision",
    "AppRevisionList",
    "AppRevisionStatus",
    "AppStatus",
    "ContainerStatus",
    # Jobs
    "Job",
    "JobList",
    "JobPatch",
    "JobPrototype",
    "JobRun",
    "JobRunList",
    "JobRunPrototype",
    "JobRunStatus",
    # Builds
    "Build",
    "BuildList",
    "BuildPatch",
    "BuildPrototype",
    "BuildRun",
    "BuildRunList",
    "BuildRunPrototype",
    "BuildRunStatus",
    "BuildStatus",
    # Secrets
    "BasicAuthSecretData",
    "GenericSecretData",
    "OperatorSecretData",
    "RegistrySecretData",
    "ResourceKeyRef",
    "RoleRef",
    "Secret",
    "SecretData",
    "SecretList",
    "SecretPrototype",
    "SecretReplace",
    "ServiceAccessSecretData",
    "ServiceIDRef",
    "ServiceInstanceRef",
    "SSHSecretData",
    "TLSSecretData",
    "decode_secret_data",
    # Bindings, config maps, domain mappings
    "Binding",
    "BindingList",
    "BindingPrototype",
    "ConfigMap",
    "ConfigMapList",
    "ConfigMapPrototype",
    "ConfigMapReplace",
    "DomainMapping",
    "DomainMappingList",
    "DomainMappingPatch",
    "DomainMappingPrototype",
    "DomainMappingStatus",
]
