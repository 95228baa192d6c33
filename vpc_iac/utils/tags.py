"""
Tag policy for network resources.

Every resource carries, lowest precedence first:
1. Stack tags: Environment and Project from NetworkConfig.get_tags()
2. User tags from the stack config ``tags`` mapping
3. Reserved tags: Name, Environment and ManagedBy (plus per-resource extras)

User tags may add keys or replace Project, but never the reserved ones.
"""

from vpc_iac.configs.base import NetworkConfig
from vpc_iac.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Reserved tag set of a single resource.

    Args:
        environment: Deployment environment
        resource_name: Value of the Name tag
        **extra_tags: Per-resource tags such as Tier

    Returns:
        ManagedBy, Environment and Name, updated with extra_tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    tags.update(extra_tags)
    return tags


def merge_tags(
    base_tags: dict[str, str],
    *additional_tags: dict[str, str],
) -> dict[str, str]:
    """Merge tag dictionaries into a new one; later dictionaries win."""
    result = dict(base_tags)
    for tags in additional_tags:
        result.update(tags)
    return result


def stack_tags(config: NetworkConfig) -> dict[str, str]:
    """Stack tags overlaid with the user's tags, without the reserved set."""
    return merge_tags(config.get_tags(), config.tags)


def resource_tags(
    config: NetworkConfig,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Full tag set for a resource declared from ``config``.

    Args:
        config: Network configuration supplying stack and user tags
        resource_name: Value of the Name tag
        **extra_tags: Per-resource tags such as Tier

    Returns:
        Tags with Name, Environment and ManagedBy taken from the template,
        whatever the user's tags say
    """
    return merge_tags(
        stack_tags(config),
        create_tags(config.environment, resource_name, **extra_tags),
    )
