"""
Allowed outbound destinations.

Destinations are polymorphic on their ``type`` field. Known types decode
into their own model; any other type decodes into the ``Unknown*``
fallback, which keeps unrecognized keys in ``model_extra``.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import ConfigDict, Discriminator, Field, Tag

from codeengine_client.models.base import CodeEngineModel, ListResponse

DESTINATION_TYPE_CIDR_BLOCK = "cidr_block"
KNOWN_DESTINATION_TYPES = frozenset({DESTINATION_TYPE_CIDR_BLOCK})

UNKNOWN_TAG = "unknown"


def destination_type(value: Any) -> Optional[str]:
    """Discriminator for the destination unions."""
    if isinstance(value, dict):
        kind = value.get("type")
    elif isinstance(value, CodeEngineModel):
        kind = getattr(value, "type", None)
    else:
        return None
    return kind if kind in KNOWN_DESTINATION_TYPES else UNKNOWN_TAG


class AllowedOutboundDestinationCidrBlockData(CodeEngineModel):
    type: Literal["cidr_block"]
    cidr_block: Optional[str] = Field(None, description="IPv4 range in CIDR notation")
    created_at: Optional[str] = None
    entity_tag: Optional[str] = None
    href: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    status_details: Optional[dict] = None


class UnknownAllowedOutboundDestination(CodeEngineModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    created_at: Optional[str] = None
    entity_tag: Optional[str] = None
    href: Optional[str] = None
    name: Optional[str] = None


AllowedOutboundDestination = Annotated[
    Union[
        Annotated[AllowedOutboundDestinationCidrBlockData, Tag(DESTINATION_TYPE_CIDR_BLOCK)],
        Annotated[UnknownAllowedOutboundDestination, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(destination_type),
]


class AllowedOutboundDestinationPrototypeCidrBlockData(CodeEngineModel):
    type: Literal["cidr_block"]
    cidr_block: str
    name: str


class UnknownAllowedOutboundDestinationPrototype(CodeEngineModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    name: Optional[str] = None


AllowedOutboundDestinationPrototype = Annotated[
    Union[
        Annotated[AllowedOutboundDestinationPrototypeCidrBlockData, Tag(DESTINATION_TYPE_CIDR_BLOCK)],
        Annotated[UnknownAllowedOutboundDestinationPrototype, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(destination_type),
]


class AllowedOutboundDestinationPatchCidrBlockData(CodeEngineModel):
    type: Literal["cidr_block"]
    cidr_block: Optional[str] = None


class UnknownAllowedOutboundDestinationPatch(CodeEngineModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None


AllowedOutboundDestinationPatch = Annotated[
    Union[
        Annotated[AllowedOutboundDestinationPatchCidrBlockData, Tag(DESTINATION_TYPE_CIDR_BLOCK)],
        Annotated[UnknownAllowedOutboundDestinationPatch, Tag(UNKNOWN_TAG)],
    ],
    Discriminator(destination_type),
]


class AllowedOutboundDestinationList(ListResponse):
    allowed_outbound_destinations: Optional[List[AllowedOutboundDestination]] = None
