"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from vpc_iac.configs.base import NetworkConfig, NetworkConfigError
from vpc_iac.configs.constants import (
    DEFAULT_AZ_COUNT,
    DEFAULT_GATEWAY_ENDPOINTS,
    DEFAULT_INTERFACE_ENDPOINTS,
    DEFAULT_SUBNET_NEWBITS,
    VPC_CIDR,
)


def _get_bool(config: pulumi.Config, key: str, default: bool) -> bool:
    value = config.get_bool(key)
    return default if value is None else value


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    value = config.get_int(key)
    return default if value is None else value


def _get_str_list(config: pulumi.Config, key: str, default: tuple[str, ...] = ()) -> tuple[str, ...]:
    value = config.get_object(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise NetworkConfigError(f"config key {key!r} must be a list of strings")
    return tuple(value)


def _get_tags(config: pulumi.Config) -> dict[str, str]:
    value = config.get_object("tags")
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise NetworkConfigError("config key 'tags' must be a mapping")
    return {str(key): str(tag) for key, tag in value.items()}


def get_config() -> NetworkConfig:
    """
    Load network configuration from Pulumi stack config.

    Returns:
        NetworkConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        NetworkConfigError: If the values do not describe a valid topology
    """
    config = pulumi.Config()

    return NetworkConfig(
        environment=config.require("environment"),
        project=config.get("project") or pulumi.get_project(),
        vpc_cidr=config.get("vpc_cidr") or VPC_CIDR,
        az_count=_get_int(config, "az_count", DEFAULT_AZ_COUNT),
        availability_zones=_get_str_list(config, "availability_zones"),
        subnet_newbits=_get_int(config, "subnet_newbits", DEFAULT_SUBNET_NEWBITS),
        public_subnet_cidrs=_get_str_list(config, "public_subnet_cidrs"),
        private_subnet_cidrs=_get_str_list(config, "private_subnet_cidrs"),
        enable_dns_hostnames=_get_bool(config, "enable_dns_hostnames", True),
        enable_dns_support=_get_bool(config, "enable_dns_support", True),
        map_public_ip_on_launch=_get_bool(config, "map_public_ip_on_launch", True),
        enable_nat_gateway=_get_bool(config, "enable_nat_gateway", True),
        single_nat_gateway=_get_bool(config, "single_nat_gateway", False),
        enable_vpc_endpoints=_get_bool(config, "enable_vpc_endpoints", False),
        gateway_endpoint_services=_get_str_list(
            config, "gateway_endpoint_services", DEFAULT_GATEWAY_ENDPOINTS
        ),
        interface_endpoint_services=_get_str_list(
            config, "interface_endpoint_services", DEFAULT_INTERFACE_ENDPOINTS
        ),
        tags=_get_tags(config),
        outputs_env_file=config.get("outputs_env_file"),
    )
