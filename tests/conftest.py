"""
Shared test fixtures and configuration.
"""

import pytest
import pulumi
import os
import sys

# Add the parent directory to the path so we can import the dbsubnets package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

TEST_ZONES = ["us-west-2a", "us-west-2b", "us-west-2c"]

class PulumiMocks(pulumi.runtime.Mocks):
    """Mock Pulumi engine that echoes resource inputs back as outputs."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {"names": TEST_ZONES, "zoneIds": ["usw2-az1", "usw2-az2", "usw2-az3"]}
        return {}

pulumi.runtime.set_mocks(PulumiMocks(), preview=False)

@pytest.fixture
def subnet_ids():
    """Subnet IDs for a three-zone deployment."""
    return ["subnet-aaa111", "subnet-bbb222", "subnet-ccc333"]
