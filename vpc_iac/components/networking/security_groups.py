"""
Security Group Component for VPC interface endpoints.

Interface endpoints are ENIs inside the private subnets and are guarded by
a security group (gateway endpoints are not). Anything inside the VPC may
reach the endpoints over HTTPS; nothing outside the VPC block can.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_iac.configs.base import NetworkConfig
from vpc_iac.configs.constants import ANY_IPV4, PORTS
from vpc_iac.utils.naming import ResourceNamer
from vpc_iac.utils.tags import resource_tags


@dataclass
class EndpointSecurityGroupOutputs:
    """Output values from the endpoint security group component."""
    security_group_id: pulumi.Output[str]


class EndpointSecurityGroupComponent(pulumi.ComponentResource):
    """
    Security group attached to interface VPC endpoints.

    - Ingress: HTTPS (443) from the VPC CIDR
    - Egress: all traffic
    """

    def __init__(
        self,
        name: str,
        config: NetworkConfig,
        vpc_id: pulumi.Input[str],
        vpc_cidr: pulumi.Input[str],
        namer: ResourceNamer | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:EndpointSecurityGroup", name, None, opts)
        self.namer = namer or ResourceNamer(config.project, config.environment)

        child_opts = pulumi.ResourceOptions(parent=self)

        sg_name = self.namer.name("endpoints-sg")
        self.security_group = aws.ec2.SecurityGroup(
            sg_name,
            description="Security group for VPC interface endpoints",
            vpc_id=vpc_id,
            tags=resource_tags(config, sg_name),
            opts=child_opts,
        )

        # Endpoints: Allow HTTPS from inside the VPC
        self.ingress_https = aws.vpc.SecurityGroupIngressRule(
            self.namer.name("endpoints-ingress-https"),
            security_group_id=self.security_group.id,
            ip_protocol="tcp",
            from_port=PORTS["https"],
            to_port=PORTS["https"],
            cidr_ipv4=vpc_cidr,
            description="HTTPS from VPC",
            opts=child_opts,
        )

        # Endpoints: Allow all outbound
        self.egress_all = aws.vpc.SecurityGroupEgressRule(
            self.namer.name("endpoints-egress-all"),
            security_group_id=self.security_group.id,
            ip_protocol="-1",
            cidr_ipv4=ANY_IPV4,
            description="All outbound traffic",
            opts=child_opts,
        )

        self.register_outputs({
            "security_group_id": self.security_group.id,
        })

    def get_outputs(self) -> EndpointSecurityGroupOutputs:
        """Get security group output values."""
        return EndpointSecurityGroupOutputs(
            security_group_id=self.security_group.id,
        )
