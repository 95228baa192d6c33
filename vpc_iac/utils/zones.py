"""
Availability zone selection.

Zones come from the stack config when listed explicitly, otherwise from the
region's available zones (Local/Wavelength zones that need opt-in excluded).
"""

from collections.abc import Sequence

import pulumi
import pulumi_aws as aws

from vpc_iac.configs.base import NetworkConfig, NetworkConfigError


def select_zones(available: Sequence[str], count: int) -> tuple[str, ...]:
    """
    Pick the first ``count`` zones, preserving the provider's order.

    Raises:
        NetworkConfigError: If the region offers fewer zones than requested
    """
    if len(available) < count:
        raise NetworkConfigError(
            f"requested {count} availability zones but only "
            f"{len(available)} are available: {list(available)}"
        )
    return tuple(available[:count])


def resolve_availability_zones(config: NetworkConfig) -> tuple[str, ...]:
    """
    Resolve the zones the topology spans.

    Args:
        config: Network configuration

    Returns:
        Tuple of az_count zone names
    """
    if config.availability_zones:
        return tuple(config.availability_zones)

    available = aws.get_availability_zones(
        state="available",
        filters=[
            aws.GetAvailabilityZonesFilterArgs(
                name="opt-in-status",
                values=["opt-in-not-required"],
            ),
        ],
    )
    zones = select_zones(available.names, config.az_count)
    pulumi.log.info(f"Discovered availability zones: {', '.join(zones)}")
    return zones
