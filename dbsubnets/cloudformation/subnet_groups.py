"""
Database subnet groups as CloudFormation resource fragments.

Each builder returns a single-entry mapping of resource name to resource
definition, ready to be merged into a template's ``Resources`` section.
The subnet references point at ``<prefix>Subnet<n>`` resources that are
expected to be defined elsewhere in the same template.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .constants import DB_SUBNET, stack_name_ref

logger = logging.getLogger(__name__)

Template = Dict[str, Any]

class UnknownSubnetGroupError(ValueError):
    """Raised when a subnet group identifier is not a known service."""

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(
            f"Unknown subnet group '{identifier}'. "
            f"Valid subnet groups: {', '.join(VALID_SUBNET_GROUPS)}"
        )

class SubnetGroupService(Enum):
    """
    The services a database subnet group can be built for.

    Each member carries its lowercase key, the CloudFormation resource type,
    the default resource name and the names of its identity-bound properties.
    The group name property is None for services that have none.
    """

    RDS = (
        "rds",
        "AWS::RDS::DBSubnetGroup",
        "RDSSubnetGroup",
        "DBSubnetGroupName",
        "DBSubnetGroupDescription",
    )
    REDSHIFT = (
        "redshift",
        "AWS::Redshift::ClusterSubnetGroup",
        "RedshiftSubnetGroup",
        None,
        "Description",
    )
    ELASTICACHE = (
        "elasticache",
        "AWS::ElastiCache::SubnetGroup",
        "ElastiCacheSubnetGroup",
        "CacheSubnetGroupName",
        "Description",
    )
    DAX = (
        "dax",
        "AWS::DAX::SubnetGroup",
        "DAXSubnetGroup",
        "SubnetGroupName",
        "Description",
    )

    def __init__(
        self,
        key: str,
        resource_type: str,
        default_name: str,
        name_property: Optional[str],
        description_property: str,
    ):
        self.key = key
        self.resource_type = resource_type
        self.default_name = default_name
        self.name_property = name_property
        self.description_property = description_property

    @classmethod
    def from_key(cls, key: Union[str, "SubnetGroupService"]) -> "SubnetGroupService":
        """
        Resolve a service from its identifier, ignoring case.

        Args:
            key: Service identifier such as "rds" or "RDS", or a member itself

        Returns:
            SubnetGroupService: The matching service

        Raises:
            UnknownSubnetGroupError: If the identifier is not a known service
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            lowered = key.lower()
            for service in cls:
                if service.key == lowered:
                    return service
        raise UnknownSubnetGroupError(key)

VALID_SUBNET_GROUPS: List[str] = [service.key for service in SubnetGroupService]

@dataclass(frozen=True)
class SubnetGroupConfig:
    """
    Options for a single subnet group fragment.

    Attributes:
        name: Logical resource name; None uses the service's default name
        subnet_prefix: Prefix of the referenced subnets, e.g. "DB" for DBSubnet1
    """

    name: Optional[str] = None
    subnet_prefix: str = DB_SUBNET

DEFAULT_CONFIG = SubnetGroupConfig()

def validate_subnet_groups(
    subnet_groups: Iterable[Union[str, SubnetGroupService]],
) -> List[SubnetGroupService]:
    """
    Resolve a list of subnet group identifiers to services.

    Args:
        subnet_groups: Service identifiers, matched case-insensitively

    Returns:
        List[SubnetGroupService]: The services, in the order given

    Raises:
        UnknownSubnetGroupError: On the first identifier that is not a known service
    """
    return [SubnetGroupService.from_key(group) for group in subnet_groups]

def build_subnet_ids(num_zones: int = 0, prefix: str = DB_SUBNET) -> List[Dict[str, str]]:
    """
    Build references to the per-zone subnets, numbered from 1.

    Args:
        num_zones: Number of availability zones
        prefix: Subnet resource name prefix

    Returns:
        List[Dict[str, str]]: One Ref per zone, empty when num_zones < 1
    """
    return [{"Ref": f"{prefix}Subnet{i}"} for i in range(1, num_zones + 1)]

def build_subnet_group(
    service: Union[str, SubnetGroupService],
    num_zones: int = 0,
    config: Optional[SubnetGroupConfig] = None,
) -> Template:
    """
    Build the subnet group fragment for one service.

    Args:
        service: Service to build the subnet group for
        num_zones: Number of availability zones
        config: Optional fragment options

    Returns:
        Template: Mapping of resource name to resource definition, or an
        empty mapping when num_zones < 1
    """
    service = SubnetGroupService.from_key(service)
    if num_zones < 1:
        return {}

    config = config or DEFAULT_CONFIG
    name = config.name if config.name is not None else service.default_name

    properties: Template = {}
    if service.name_property:
        properties[service.name_property] = stack_name_ref()
    properties[service.description_property] = stack_name_ref()
    properties["SubnetIds"] = build_subnet_ids(num_zones, config.subnet_prefix)

    logger.debug("Built %s subnet group %s across %d zones", service.key, name, num_zones)
    return {
        name: {
            "Type": service.resource_type,
            "Properties": properties,
        },
    }

def build_rds_subnet_group(num_zones: int = 0, config: Optional[SubnetGroupConfig] = None) -> Template:
    """Build an AWS::RDS::DBSubnetGroup for a given number of zones."""
    return build_subnet_group(SubnetGroupService.RDS, num_zones, config)

def build_redshift_subnet_group(num_zones: int = 0, config: Optional[SubnetGroupConfig] = None) -> Template:
    """Build an AWS::Redshift::ClusterSubnetGroup for a given number of zones."""
    return build_subnet_group(SubnetGroupService.REDSHIFT, num_zones, config)

def build_elasticache_subnet_group(num_zones: int = 0, config: Optional[SubnetGroupConfig] = None) -> Template:
    """Build an AWS::ElastiCache::SubnetGroup for a given number of zones."""
    return build_subnet_group(SubnetGroupService.ELASTICACHE, num_zones, config)

def build_dax_subnet_group(num_zones: int = 0, config: Optional[SubnetGroupConfig] = None) -> Template:
    """Build an AWS::DAX::SubnetGroup for a given number of zones."""
    return build_subnet_group(SubnetGroupService.DAX, num_zones, config)

def build_subnet_groups(
    num_zones: int = 0,
    subnet_groups: Optional[Sequence[Union[str, SubnetGroupService]]] = None,
) -> Template:
    """
    Build the database subnet groups.

    Args:
        num_zones: Number of availability zones; fewer than 2 builds nothing
        subnet_groups: Services to build, matched case-insensitively.
            Empty or None builds all of them.

    Returns:
        Template: Merged fragments; later entries win on a name collision

    Raises:
        UnknownSubnetGroupError: If any identifier is not a known service.
            Nothing is built in that case.
    """
    if num_zones < 2:
        return {}

    if subnet_groups:
        services = validate_subnet_groups(subnet_groups)
    else:
        services = list(SubnetGroupService)

    resources: Template = {}
    for service in services:
        resources.update(build_subnet_group(service, num_zones))
    return resources
