"""
CIDR subdivision for per-zone subnets.

Public subnets take the first zone_count blocks of the VPC range and
private subnets the next zone_count, all of equal size.
"""

import ipaddress
from dataclasses import dataclass

from vpc_iac.configs.base import NetworkConfigError
from vpc_iac.configs.constants import MAX_PREFIX_LENGTH


@dataclass(frozen=True)
class SubnetPlan:
    """CIDR blocks for each tier, indexed by zone position."""
    public: tuple[str, ...]
    private: tuple[str, ...]

    @property
    def all_blocks(self) -> tuple[str, ...]:
        return self.public + self.private


def cidrsubnet(prefix: str, newbits: int, netnum: int) -> str:
    """
    Calculate a subnet address within a given network prefix.

    Extends the prefix length by ``newbits`` and returns block number
    ``netnum`` of the resulting size.

    Args:
        prefix: Parent network in CIDR notation (e.g., '10.0.0.0/16')
        newbits: Bits to add to the prefix length
        netnum: Index of the block to return

    Returns:
        Subnet in CIDR notation (e.g., '10.0.3.0/24' for newbits=8, netnum=3)

    Raises:
        NetworkConfigError: If the prefix is invalid or netnum does not fit
    """
    try:
        network = ipaddress.IPv4Network(prefix)
    except ValueError as exc:
        raise NetworkConfigError(f"invalid CIDR {prefix!r}: {exc}") from exc

    new_prefix = network.prefixlen + newbits
    if newbits < 0 or new_prefix > network.max_prefixlen:
        raise NetworkConfigError(
            f"cannot extend /{network.prefixlen} by {newbits} bits"
        )
    if not 0 <= netnum < 2 ** newbits:
        raise NetworkConfigError(
            f"netnum {netnum} does not fit in {newbits} bits of {prefix}"
        )

    block_size = 2 ** (network.max_prefixlen - new_prefix)
    base = int(network.network_address) + netnum * block_size
    return str(ipaddress.IPv4Network((base, new_prefix)))


def _validate_blocks(vpc_cidr: str, blocks: tuple[str, ...]) -> None:
    vpc = ipaddress.IPv4Network(vpc_cidr)
    networks = []
    for block in blocks:
        try:
            network = ipaddress.IPv4Network(block)
        except ValueError as exc:
            raise NetworkConfigError(f"invalid subnet CIDR {block!r}: {exc}") from exc
        if not network.subnet_of(vpc):
            raise NetworkConfigError(f"subnet {block} is outside VPC block {vpc_cidr}")
        if network.prefixlen > MAX_PREFIX_LENGTH:
            raise NetworkConfigError(
                f"subnet {block} is smaller than /{MAX_PREFIX_LENGTH}, the smallest AWS subnet"
            )
        networks.append(network)

    for index, network in enumerate(networks):
        for other in networks[index + 1:]:
            if network.overlaps(other):
                raise NetworkConfigError(f"subnets {network} and {other} overlap")


def plan_subnets(
    vpc_cidr: str,
    zone_count: int,
    newbits: int,
    public: tuple[str, ...] = (),
    private: tuple[str, ...] = (),
) -> SubnetPlan:
    """
    Derive public and private subnet blocks for each availability zone.

    Args:
        vpc_cidr: VPC block in CIDR notation
        zone_count: Number of zones (one public and one private subnet each)
        newbits: Bits added to the VPC prefix for computed subnets
        public: Explicit public blocks, replaces the computed ones when set
        private: Explicit private blocks, replaces the computed ones when set

    Returns:
        SubnetPlan with one block per zone for each tier

    Raises:
        NetworkConfigError: If blocks do not fit, leave the VPC, or overlap
    """
    if not public or not private:
        if 2 * zone_count > 2 ** newbits:
            raise NetworkConfigError(
                f"{2 * zone_count} subnets do not fit in {vpc_cidr} with newbits={newbits}"
            )

    if not public:
        public = tuple(cidrsubnet(vpc_cidr, newbits, index) for index in range(zone_count))
    if not private:
        private = tuple(
            cidrsubnet(vpc_cidr, newbits, index + zone_count) for index in range(zone_count)
        )

    if len(public) != zone_count or len(private) != zone_count:
        raise NetworkConfigError(
            f"expected {zone_count} public and private subnets, "
            f"got {len(public)} and {len(private)}"
        )

    plan = SubnetPlan(public=tuple(public), private=tuple(private))
    _validate_blocks(vpc_cidr, plan.all_blocks)
    return plan
