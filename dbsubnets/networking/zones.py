import boto3
import pulumi_aws as aws
from typing import List, Optional

def get_availability_zones() -> List[str]:
    """
    Get a list of available availability zones in the current region.

    Must be called from within a Pulumi program.

    Returns:
        List[str]: List of availability zone names
    """
    zones = aws.get_availability_zones(state="available")
    return zones.names

def count_availability_zones(
    region: Optional[str] = None,
    session: Optional[boto3.session.Session] = None,
) -> int:
    """
    Count the available availability zones in a region.

    Useful for choosing num_zones when building CloudFormation fragments
    outside of a Pulumi program.

    Args:
        region: Optional region name (defaults to the session's region)
        session: Optional boto3 session (defaults to a new one)

    Returns:
        int: Number of zones in the "available" state
    """
    session = session or boto3.session.Session()
    ec2 = session.client("ec2", region_name=region)
    response = ec2.describe_availability_zones(
        Filters=[{"Name": "state", "Values": ["available"]}],
    )
    return len(response.get("AvailabilityZones", []))
