import logging
import pulumi
import pulumi_aws as aws
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..cloudformation.subnet_groups import SubnetGroupService, validate_subnet_groups
from ..utils.tags import get_default_tags, merge_tags

logger = logging.getLogger(__name__)

_LABELS = {
    SubnetGroupService.RDS: "RDS",
    SubnetGroupService.REDSHIFT: "Redshift",
    SubnetGroupService.ELASTICACHE: "ElastiCache",
    SubnetGroupService.DAX: "DAX",
}

def _resource_name(name: str, service: SubnetGroupService) -> str:
    return f"{name}-{service.key}-subnet-group"

def _description(name: str, service: SubnetGroupService, description: Optional[str]) -> str:
    return description or f"{_LABELS[service]} subnet group for {name}"

def _tags(
    name: str,
    project: Optional[str],
    environment: str,
    tags: Optional[Dict[str, str]],
) -> Dict[str, str]:
    # Project defaults to the subnet group base name
    return merge_tags(get_default_tags(project or name, environment), tags)

def create_rds_subnet_group(
    name: str,
    subnet_ids: List[str],
    description: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None,
    project: Optional[str] = None,
    environment: str = "dev",
) -> aws.rds.SubnetGroup:
    """
    Create an RDS DB subnet group spanning the given subnets.

    Args:
        name: Base name for the subnet group
        subnet_ids: IDs of the subnets, one per availability zone
        description: Optional description (defaults to one derived from name)
        tags: Optional dictionary of tags, merged over the default tags
        project: Project tag value (defaults to name)
        environment: Environment tag value

    Returns:
        aws.rds.SubnetGroup: The created subnet group
    """
    resource_name = _resource_name(name, SubnetGroupService.RDS)
    return aws.rds.SubnetGroup(
        resource_name,
        name=resource_name,
        description=_description(name, SubnetGroupService.RDS, description),
        subnet_ids=subnet_ids,
        tags=_tags(name, project, environment, tags),
    )

def create_redshift_subnet_group(
    name: str,
    subnet_ids: List[str],
    description: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None,
    project: Optional[str] = None,
    environment: str = "dev",
) -> aws.redshift.SubnetGroup:
    """
    Create a Redshift cluster subnet group spanning the given subnets.

    Args:
        name: Base name for the subnet group
        subnet_ids: IDs of the subnets, one per availability zone
        description: Optional description (defaults to one derived from name)
        tags: Optional dictionary of tags, merged over the default tags
        project: Project tag value (defaults to name)
        environment: Environment tag value

    Returns:
        aws.redshift.SubnetGroup: The created subnet group
    """
    resource_name = _resource_name(name, SubnetGroupService.REDSHIFT)
    return aws.redshift.SubnetGroup(
        resource_name,
        name=resource_name,
        description=_description(name, SubnetGroupService.REDSHIFT, description),
        subnet_ids=subnet_ids,
        tags=_tags(name, project, environment, tags),
    )

def create_elasticache_subnet_group(
    name: str,
    subnet_ids: List[str],
    description: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None,
    project: Optional[str] = None,
    environment: str = "dev",
) -> aws.elasticache.SubnetGroup:
    """
    Create an ElastiCache subnet group spanning the given subnets.

    Args:
        name: Base name for the subnet group
        subnet_ids: IDs of the subnets, one per availability zone
        description: Optional description (defaults to one derived from name)
        tags: Optional dictionary of tags, merged over the default tags
        project: Project tag value (defaults to name)
        environment: Environment tag value

    Returns:
        aws.elasticache.SubnetGroup: The created subnet group
    """
    resource_name = _resource_name(name, SubnetGroupService.ELASTICACHE)
    return aws.elasticache.SubnetGroup(
        resource_name,
        name=resource_name,
        description=_description(name, SubnetGroupService.ELASTICACHE, description),
        subnet_ids=subnet_ids,
        tags=_tags(name, project, environment, tags),
    )

def create_dax_subnet_group(
    name: str,
    subnet_ids: List[str],
    description: Optional[str] = None,
) -> aws.dax.SubnetGroup:
    """
    Create a DAX subnet group spanning the given subnets.

    DAX subnet groups do not support tags.

    Args:
        name: Base name for the subnet group
        subnet_ids: IDs of the subnets, one per availability zone
        description: Optional description (defaults to one derived from name)

    Returns:
        aws.dax.SubnetGroup: The created subnet group
    """
    resource_name = _resource_name(name, SubnetGroupService.DAX)
    return aws.dax.SubnetGroup(
        resource_name,
        name=resource_name,
        description=_description(name, SubnetGroupService.DAX, description),
        subnet_ids=subnet_ids,
    )

def create_subnet_groups(
    name: str,
    subnet_ids: List[str],
    services: Optional[Sequence[Union[str, SubnetGroupService]]] = None,
    tags: Optional[Dict[str, str]] = None,
    project: Optional[str] = None,
    environment: str = "dev",
) -> Dict[SubnetGroupService, pulumi.CustomResource]:
    """
    Create database subnet groups for several services at once.

    Args:
        name: Base name for the subnet groups
        subnet_ids: IDs of the subnets, one per availability zone
        services: Services to create groups for (all of them if empty)
        tags: Optional dictionary of tags merged over the default tags, ignored for DAX
        project: Project tag value (defaults to name)
        environment: Environment tag value

    Returns:
        Dict[SubnetGroupService, pulumi.CustomResource]: The created subnet
        groups, empty when fewer than two subnets are given

    Raises:
        UnknownSubnetGroupError: If any service identifier is unknown
    """
    if len(subnet_ids) < 2:
        logger.debug("Skipping subnet groups for %s: need at least 2 subnets, got %d", name, len(subnet_ids))
        return {}

    resolved = validate_subnet_groups(services) if services else list(SubnetGroupService)
    tag_args = {"tags": tags, "project": project, "environment": environment}

    creators: Dict[SubnetGroupService, Callable[[], pulumi.CustomResource]] = {
        SubnetGroupService.RDS: lambda: create_rds_subnet_group(name, subnet_ids, **tag_args),
        SubnetGroupService.REDSHIFT: lambda: create_redshift_subnet_group(name, subnet_ids, **tag_args),
        SubnetGroupService.ELASTICACHE: lambda: create_elasticache_subnet_group(name, subnet_ids, **tag_args),
        SubnetGroupService.DAX: lambda: create_dax_subnet_group(name, subnet_ids),
    }

    groups: Dict[SubnetGroupService, pulumi.CustomResource] = {}
    for service in resolved:
        # A repeated service would register the same resource name twice
        if service in groups:
            continue
        logger.debug("Creating %s subnet group for %s", service.key, name)
        groups[service] = creators[service]()
    return groups
