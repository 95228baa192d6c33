"""
Base configuration dataclass for the network template.

Provides a validated, immutable view of the Pulumi stack config.
"""

import ipaddress
from dataclasses import dataclass, field

from vpc_iac.configs.constants import (
    DEFAULT_AZ_COUNT,
    DEFAULT_GATEWAY_ENDPOINTS,
    DEFAULT_INTERFACE_ENDPOINTS,
    DEFAULT_SUBNET_NEWBITS,
    GATEWAY_ENDPOINT_SERVICES,
    MAX_PREFIX_LENGTH,
    MIN_PREFIX_LENGTH,
    VPC_CIDR,
)


class NetworkConfigError(ValueError):
    """Raised when the network configuration cannot produce a valid topology."""


def endpoint_key(service: str) -> str:
    """Name-safe form of an endpoint service ('ecr.api' -> 'ecr-api')."""
    return service.replace(".", "-")


@dataclass(frozen=True)
class NetworkConfig:
    """
    Stack-specific configuration for the VPC topology.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        project: Project prefix used in resource names and tags
        vpc_cidr: IPv4 block of the VPC
        az_count: Number of availability zones to span
        availability_zones: Explicit zone names, overrides discovery when set
        subnet_newbits: Bits added to the VPC prefix for every subnet
        public_subnet_cidrs: Explicit public subnet blocks, one per zone
        private_subnet_cidrs: Explicit private subnet blocks, one per zone
        enable_dns_hostnames: Assign DNS hostnames to instances
        enable_dns_support: Enable the Amazon-provided DNS resolver
        map_public_ip_on_launch: Public subnets auto-assign public IPs
        enable_nat_gateway: Give private subnets outbound internet access
        single_nat_gateway: Share one NAT gateway across all zones
        enable_vpc_endpoints: Declare VPC endpoints and their security group
        gateway_endpoint_services: Gateway endpoint services (s3, dynamodb)
        interface_endpoint_services: Interface (PrivateLink) endpoint services
        tags: Extra tags merged onto every resource
        outputs_env_file: Write resolved stack outputs to this file when set
    """
    environment: str
    project: str = "vpc"
    vpc_cidr: str = VPC_CIDR
    az_count: int = DEFAULT_AZ_COUNT
    availability_zones: tuple[str, ...] = ()
    subnet_newbits: int = DEFAULT_SUBNET_NEWBITS
    public_subnet_cidrs: tuple[str, ...] = ()
    private_subnet_cidrs: tuple[str, ...] = ()
    enable_dns_hostnames: bool = True
    enable_dns_support: bool = True
    map_public_ip_on_launch: bool = True
    enable_nat_gateway: bool = True
    single_nat_gateway: bool = False
    enable_vpc_endpoints: bool = False
    gateway_endpoint_services: tuple[str, ...] = DEFAULT_GATEWAY_ENDPOINTS
    interface_endpoint_services: tuple[str, ...] = DEFAULT_INTERFACE_ENDPOINTS
    tags: dict[str, str] = field(default_factory=dict)
    outputs_env_file: str | None = None

    def __post_init__(self) -> None:
        if not self.environment:
            raise NetworkConfigError("environment must not be empty")

        if self.az_count < 1:
            raise NetworkConfigError(f"az_count must be at least 1, got {self.az_count}")

        try:
            network = ipaddress.IPv4Network(self.vpc_cidr)
        except ValueError as exc:
            raise NetworkConfigError(f"invalid vpc_cidr {self.vpc_cidr!r}: {exc}") from exc

        if not MIN_PREFIX_LENGTH <= network.prefixlen <= MAX_PREFIX_LENGTH:
            raise NetworkConfigError(
                f"vpc_cidr prefix must be between /{MIN_PREFIX_LENGTH} and "
                f"/{MAX_PREFIX_LENGTH}, got /{network.prefixlen}"
            )

        if self.subnet_newbits < 1 or network.prefixlen + self.subnet_newbits > MAX_PREFIX_LENGTH:
            raise NetworkConfigError(
                f"subnet_newbits={self.subnet_newbits} does not fit /{network.prefixlen} "
                f"(subnets must be /{MAX_PREFIX_LENGTH} or larger)"
            )

        if self.availability_zones:
            if len(self.availability_zones) != self.az_count:
                raise NetworkConfigError(
                    f"availability_zones lists {len(self.availability_zones)} zones "
                    f"but az_count is {self.az_count}"
                )
            if len(set(self.availability_zones)) != len(self.availability_zones):
                raise NetworkConfigError("availability_zones must not repeat a zone")

        for label, cidrs in (
            ("public_subnet_cidrs", self.public_subnet_cidrs),
            ("private_subnet_cidrs", self.private_subnet_cidrs),
        ):
            if cidrs and len(cidrs) != self.az_count:
                raise NetworkConfigError(
                    f"{label} lists {len(cidrs)} blocks but az_count is {self.az_count}"
                )

        unknown = set(self.gateway_endpoint_services) - GATEWAY_ENDPOINT_SERVICES
        if unknown:
            raise NetworkConfigError(
                f"gateway endpoints are only available for "
                f"{sorted(GATEWAY_ENDPOINT_SERVICES)}, got {sorted(unknown)}"
            )

        for label, services in (
            ("gateway_endpoint_services", self.gateway_endpoint_services),
            ("interface_endpoint_services", self.interface_endpoint_services),
        ):
            _check_endpoint_services(label, services)

        if self.single_nat_gateway and not self.enable_nat_gateway:
            raise NetworkConfigError("single_nat_gateway requires enable_nat_gateway")

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def nat_gateway_count(self) -> int:
        """Number of NAT gateways the topology declares."""
        if not self.enable_nat_gateway:
            return 0
        if self.single_nat_gateway:
            return 1
        return self.az_count

    def get_tags(self) -> dict[str, str]:
        """Get stack-level tags."""
        return {
            "Environment": self.environment,
            "Project": self.project,
        }


def _check_endpoint_services(label: str, services: tuple[str, ...]) -> None:
    # Endpoint resources are named after endpoint_key(service), so two
    # entries with the same key would declare the same resource twice
    seen: dict[str, str] = {}
    for service in services:
        if not service:
            raise NetworkConfigError(f"{label} must not contain an empty service name")
        key = endpoint_key(service)
        if key in seen:
            if seen[key] == service:
                raise NetworkConfigError(f"{label} repeats service {service!r}")
            raise NetworkConfigError(
                f"{label} services {seen[key]!r} and {service!r} "
                f"map to the same endpoint name {key!r}"
            )
        seen[key] = service
