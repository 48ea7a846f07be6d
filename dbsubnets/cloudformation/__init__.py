"""
CloudFormation template fragments.
"""

from .subnet_groups import (
    SubnetGroupConfig,
    SubnetGroupService,
    UnknownSubnetGroupError,
    VALID_SUBNET_GROUPS,
    build_dax_subnet_group,
    build_elasticache_subnet_group,
    build_rds_subnet_group,
    build_redshift_subnet_group,
    build_subnet_group,
    build_subnet_groups,
    build_subnet_ids,
    validate_subnet_groups,
)

__all__ = [
    'SubnetGroupConfig',
    'SubnetGroupService',
    'UnknownSubnetGroupError',
    'VALID_SUBNET_GROUPS',
    'build_dax_subnet_group',
    'build_elasticache_subnet_group',
    'build_rds_subnet_group',
    'build_redshift_subnet_group',
    'build_subnet_group',
    'build_subnet_groups',
    'build_subnet_ids',
    'validate_subnet_groups',
]
