from typing import Dict, Optional

MANAGED_BY = "dbsubnets"

def get_default_tags(project: str, environment: str = "dev") -> Dict[str, str]:
    """
    Get default tags for the subnet group resources.

    Args:
        project: Name of the project
        environment: Environment name (dev, prod, etc.)

    Returns:
        Dict[str, str]: Dictionary of default tags
    """
    return {
        "Project": project,
        "Environment": environment,
        "ManagedBy": MANAGED_BY,
    }

def merge_tags(default_tags: Dict[str, str], custom_tags: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Merge default tags with custom tags, custom values taking precedence.

    Args:
        default_tags: Default tags dictionary
        custom_tags: Optional custom tags dictionary

    Returns:
        Dict[str, str]: A new merged tags dictionary
    """
    return {**default_tags, **(custom_tags or {})}
