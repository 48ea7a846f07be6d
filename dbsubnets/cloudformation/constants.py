from typing import Dict

# Prefix of the per-zone database subnets defined elsewhere in the template
DB_SUBNET = "DB"

STACK_NAME = "AWS::StackName"

def stack_name_ref() -> Dict[str, str]:
    """Return a fresh reference to the enclosing stack's name."""
    return {"Ref": STACK_NAME}
