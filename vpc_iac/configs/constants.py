"""
Network constants for the VPC template.

Contains default CIDR layout, endpoint services, tags and ports.
"""

from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# AWS accepts VPC and subnet blocks between /16 and /28
MIN_PREFIX_LENGTH: Final[int] = 16
MAX_PREFIX_LENGTH: Final[int] = 28

# Subnet layout
DEFAULT_AZ_COUNT: Final[int] = 2
DEFAULT_SUBNET_NEWBITS: Final[int] = 8  # /16 -> /24 (256 addresses per subnet)

# Route destination for internet-bound traffic
ANY_IPV4: Final[str] = "0.0.0.0/0"

# Only these services are offered as Gateway endpoints by AWS
GATEWAY_ENDPOINT_SERVICES: Final[frozenset[str]] = frozenset({"s3", "dynamodb"})

DEFAULT_GATEWAY_ENDPOINTS: Final[tuple[str, ...]] = ("s3",)

# Session Manager + ECR pulls + CloudWatch Logs from private subnets
DEFAULT_INTERFACE_ENDPOINTS: Final[tuple[str, ...]] = (
    "ssm",
    "ssmmessages",
    "ec2messages",
    "ecr.api",
    "ecr.dkr",
    "logs",
)

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "https": 443,
}
