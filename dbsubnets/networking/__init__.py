"""
Networking resources for database services.
"""

from .subnet_groups import (
    create_rds_subnet_group,
    create_redshift_subnet_group,
    create_elasticache_subnet_group,
    create_dax_subnet_group,
    create_subnet_groups,
)
from .zones import get_availability_zones, count_availability_zones

__all__ = [
    'create_rds_subnet_group',
    'create_redshift_subnet_group',
    'create_elasticache_subnet_group',
    'create_dax_subnet_group',
    'create_subnet_groups',
    'get_availability_zones',
    'count_availability_zones',
]
