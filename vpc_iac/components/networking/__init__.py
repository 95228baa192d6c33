"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with per-zone subnets, NAT gateways, route tables
- EndpointSecurityGroupComponent: Security group for interface endpoints
- VpcEndpointsComponent: Gateway and interface VPC endpoints
"""

from vpc_iac.components.networking.vpc import VpcComponent, VpcOutputs
from vpc_iac.components.networking.security_groups import (
    EndpointSecurityGroupComponent,
    EndpointSecurityGroupOutputs,
)
from vpc_iac.components.networking.vpc_endpoints import (
    VpcEndpointOutputs,
    VpcEndpointsComponent,
    service_name,
)

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "EndpointSecurityGroupComponent",
    "EndpointSecurityGroupOutputs",
    "VpcEndpointsComponent",
    "VpcEndpointOutputs",
    "service_name",
]
