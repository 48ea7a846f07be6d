from dbsubnets.utils.tags import get_default_tags, merge_tags

def test_get_default_tags():
    """Test default tags for subnet group resources."""
    tags = get_default_tags("orders-db", "staging")

    assert tags == {
        "Project": "orders-db",
        "Environment": "staging",
        "ManagedBy": "dbsubnets"
    }

def test_get_default_tags_environment_defaults_to_dev():
    """Test that the environment defaults to dev."""
    assert get_default_tags("orders-db")["Environment"] == "dev"

def test_merge_tags_custom_values_win():
    """Test merging tags with overlapping keys."""
    default_tags = get_default_tags("orders-db")

    merged_tags = merge_tags(default_tags, {"Environment": "prod", "Owner": "data-team"})

    assert merged_tags["Environment"] == "prod"
    assert merged_tags["Owner"] == "data-team"
    assert merged_tags["ManagedBy"] == "dbsubnets"

def test_merge_tags_returns_new_dict():
    """Test that merging never mutates the default tags."""
    default_tags = get_default_tags("orders-db")

    merged_tags = merge_tags(default_tags, None)
    merged_tags["Owner"] = "data-team"

    assert merged_tags is not default_tags
    assert "Owner" not in default_tags
