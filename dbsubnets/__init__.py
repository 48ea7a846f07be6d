"""
dbsubnets - database subnet groups for AWS stacks.

Builds CloudFormation subnet group fragments for RDS, Redshift,
ElastiCache and DAX, and provisions the same groups with Pulumi.
"""

__version__ = "0.1.0"
