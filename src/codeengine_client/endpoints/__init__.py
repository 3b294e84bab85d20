"""
Endpoint clients, one per resource type.
"""

from codeengine_client.endpoints.allowed_outbound_destinations import AllowedOutboundDestinationsClient
from codeengine_client.endpoints.apps import AppsClient
from codeengine_client.endpoints.base import BaseEndpointClient
from codeengine_client.endpoints.bindings import BindingsClient
from codeengine_client.endpoints.builds import BuildsClient
from codeengine_client.endpoints.config_maps import ConfigMapsClient
from codeengine_client.endpoints.domain_mappings import DomainMappingsClient
from codeengine_client.endpoints.jobs import JobsClient
from codeengine_client.endpoints.projects import ProjectsClient
from codeengine_client.endpoints.reclamations import ReclamationsClient
from codeengine_client.endpoints.secrets import SecretsClient

__all__ = [
    "AllowedOutboundDestinationsClient",
    "AppsClient",
    "BaseEndpointClient",
    "BindingsClient",
    "BuildsClient",
    "ConfigMapsClient",
    "DomainMappingsClient",
    "JobsClient",
    "ProjectsClient",
    "ReclamationsClient",
    "SecretsClient",
]
