"""
Configuration module for the VPC template.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from vpc_iac.configs.base import NetworkConfig, NetworkConfigError
from vpc_iac.configs.environment import get_config
from vpc_iac.configs.constants import (
    VPC_CIDR,
    DEFAULT_TAGS,
    DEFAULT_INTERFACE_ENDPOINTS,
    DEFAULT_GATEWAY_ENDPOINTS,
)

__all__ = [
    "NetworkConfig",
    "NetworkConfigError",
    "get_config",
    "VPC_CIDR",
    "DEFAULT_TAGS",
    "DEFAULT_INTERFACE_ENDPOINTS",
    "DEFAULT_GATEWAY_ENDPOINTS",
]
