"""
VPC Endpoints Component for Private AWS Service Access.

Concepts & Architecture:
1. The Problem: Private subnets reach AWS APIs through the NAT gateway, paying
   NAT data processing, or not at all when NAT is disabled.
   - Solution: VPC Endpoints.

2. Types of Endpoints:
   A. Gateway Endpoints:
      - Used for: S3 and DynamoDB (the only services AWS offers this way).
      - Mechanism: Adds a prefix-list route to the given route tables.
      - Cost: FREE.

   B. Interface Endpoints:
      - Used for: everything else (SSM, ECR, CloudWatch Logs, STS, ...).
      - Mechanism: One ENI per subnet with a private IP.
      - DNS: "private_dns_enabled=True" makes the public service hostname
        resolve to the ENI inside the VPC.
      - Cost: Paid (hourly per AZ + data processing).
      - Security: protected by a Security Group.
"""

from dataclasses import dataclass, field

import pulumi
import pulumi_aws as aws

from vpc_iac.configs.base import NetworkConfig, endpoint_key
from vpc_iac.utils.naming import ResourceNamer
from vpc_iac.utils.tags import resource_tags


def service_name(region: str, service: str) -> str:
    """
    Build the endpoint service name for an AWS service.

    Args:
        region: AWS region (e.g., 'us-east-1')
        service: Service short name (e.g., 's3', 'ecr.api')

    Returns:
        Service name such as 'com.amazonaws.us-east-1.ecr.api'
    """
    return f"com.amazonaws.{region}.{service}"


@dataclass
class VpcEndpointOutputs:
    """Output values from VPC endpoints component, keyed by service."""
    gateway_endpoint_ids: dict[str, pulumi.Output[str]] = field(default_factory=dict)
    interface_endpoint_ids: dict[str, pulumi.Output[str]] = field(default_factory=dict)


class VpcEndpointsComponent(pulumi.ComponentResource):
    """
    VPC endpoints for private AWS service access.

    Gateway endpoints are free and route through the VPC route tables.
    Interface endpoints use PrivateLink ENIs in the given subnets. Service
    lists come from the validated config, so endpoint names are unique.
    """

    def __init__(
        self,
        name: str,
        config: NetworkConfig,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        route_table_ids: list[pulumi.Input[str]],
        namer: ResourceNamer | None = None,
        region: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:VpcEndpoints", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        namer = namer or ResourceNamer(config.project, config.environment)
        region = region or aws.get_region().id

        self.gateway_endpoints: dict[str, aws.ec2.VpcEndpoint] = {}
        for service in config.gateway_endpoint_services:
            resource_name = namer.name(f"{endpoint_key(service)}-gateway-endpoint")
            self.gateway_endpoints[service] = aws.ec2.VpcEndpoint(
                resource_name,
                vpc_id=vpc_id,
                service_name=service_name(region, service),
                vpc_endpoint_type="Gateway",
                route_table_ids=route_table_ids,
                tags=resource_tags(config, resource_name),
                opts=child_opts,
            )

        self.interface_endpoints: dict[str, aws.ec2.VpcEndpoint] = {}
        for service in config.interface_endpoint_services:
            resource_name = namer.name(f"{endpoint_key(service)}-endpoint")
            self.interface_endpoints[service] = aws.ec2.VpcEndpoint(
                resource_name,
                vpc_id=vpc_id,
                service_name=service_name(region, service),
                vpc_endpoint_type="Interface",
                subnet_ids=subnet_ids,
                security_group_ids=[security_group_id],
                private_dns_enabled=True,
                tags=resource_tags(config, resource_name),
                opts=child_opts,
            )

        pulumi.log.info(
            f"Declaring {len(self.gateway_endpoints)} gateway and "
            f"{len(self.interface_endpoints)} interface endpoint(s) in {region}",
            resource=self,
        )

        outputs = self.get_outputs()
        self.register_outputs({
            "gateway_endpoint_ids": outputs.gateway_endpoint_ids,
            "interface_endpoint_ids": outputs.interface_endpoint_ids,
        })

    def get_outputs(self) -> VpcEndpointOutputs:
        """Get VPC endpoint output values."""
        return VpcEndpointOutputs(
            gateway_endpoint_ids={
                service: endpoint.id for service, endpoint in self.gateway_endpoints.items()
            },
            interface_endpoint_ids={
                service: endpoint.id for service, endpoint in self.interface_endpoints.items()
            },
        )
