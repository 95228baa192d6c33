"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC: Defines the isolated network container (10.0.0.0/16 by default).
2. Internet Gateway (IGW): the "door" to the internet, attached to the VPC.
3. Subnets (one pair per availability zone):
   - Public: first block of the VPC range per zone, auto-assigns public IPs.
     Hosts the NAT gateways.
   - Private: blocks following the public ones. No direct internet entry.
4. Elastic IPs + NAT Gateways:
   - One per zone (default) or a single shared one (single_nat_gateway).
   - Declared with an explicit dependency on the IGW: a NAT gateway cannot
     route until the VPC has an attached internet gateway.
5. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW, shared by every public subnet.
   - Private RT (one per zone): 0.0.0.0/0 -> the zone's NAT gateway, or
     the first NAT gateway when a single one is shared. Without NAT only
     the implicit "local" route exists.
6. Associations: Explicitly linking subnets to route tables to enforce these rules.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from vpc_iac.configs.base import NetworkConfig, NetworkConfigError
from vpc_iac.configs.constants import ANY_IPV4
from vpc_iac.utils.cidr import SubnetPlan, plan_subnets
from vpc_iac.utils.naming import ResourceNamer, zone_suffix
from vpc_iac.utils.tags import resource_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    vpc_cidr_block: pulumi.Output[str]
    availability_zones: list[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    public_subnet_cidrs: list[str]
    private_subnet_cidrs: list[str]
    internet_gateway_id: pulumi.Output[str]
    nat_gateway_ids: list[pulumi.Output[str]]
    nat_public_ips: list[pulumi.Output[str]]
    public_route_table_id: pulumi.Output[str]
    private_route_table_ids: list[pulumi.Output[str]]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public/private subnets per zone and NAT gateways.

    Resource order is fixed by references (subnets need the VPC id, routes
    need gateway ids) plus an explicit IGW dependency on EIPs and NATs.
    """

    def __init__(
        self,
        name: str,
        config: NetworkConfig,
        zones: tuple[str, ...],
        namer: ResourceNamer | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        zones = tuple(zones)
        if len(zones) != config.az_count:
            raise NetworkConfigError(
                f"expected {config.az_count} availability zones, got {len(zones)}"
            )
        # Zone suffixes become part of logical names and must stay unique
        if len({zone_suffix(zone) for zone in zones}) != len(zones):
            raise NetworkConfigError(f"zones {list(zones)} share a name suffix")

        subnet_plan = plan_subnets(
            config.vpc_cidr,
            len(zones),
            config.subnet_newbits,
            public=config.public_subnet_cidrs,
            private=config.private_subnet_cidrs,
        )

        super().__init__("custom:networking:Vpc", name, None, opts)
        self.config = config
        self.namer = namer or ResourceNamer(config.project, config.environment)
        self.zones = zones
        self.subnet_plan: SubnetPlan = subnet_plan

        child_opts = pulumi.ResourceOptions(parent=self)

        # Create VPC
        vpc_name = self.namer.name("vpc")
        self.vpc = aws.ec2.Vpc(
            vpc_name,
            cidr_block=config.vpc_cidr,
            enable_dns_hostnames=config.enable_dns_hostnames,
            enable_dns_support=config.enable_dns_support,
            tags=resource_tags(config, vpc_name),
            opts=child_opts,
        )

        # Create Internet Gateway
        igw_name = self.namer.name("igw")
        self.igw = aws.ec2.InternetGateway(
            igw_name,
            vpc_id=self.vpc.id,
            tags=resource_tags(config, igw_name),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        self.private_subnets: list[aws.ec2.Subnet] = []
        for zone, public_cidr, private_cidr in zip(
            self.zones, self.subnet_plan.public, self.subnet_plan.private
        ):
            public_name = self.namer.zonal("public", zone)
            self.public_subnets.append(aws.ec2.Subnet(
                public_name,
                vpc_id=self.vpc.id,
                cidr_block=public_cidr,
                availability_zone=zone,
                map_public_ip_on_launch=config.map_public_ip_on_launch,
                tags=resource_tags(config, public_name, Tier="public"),
                opts=child_opts,
            ))

            private_name = self.namer.zonal("private", zone)
            self.private_subnets.append(aws.ec2.Subnet(
                private_name,
                vpc_id=self.vpc.id,
                cidr_block=private_cidr,
                availability_zone=zone,
                map_public_ip_on_launch=False,
                tags=resource_tags(config, private_name, Tier="private"),
                opts=child_opts,
            ))

        self._create_nat_gateways()
        self._create_route_tables(child_opts)

        outputs = self.get_outputs()
        self.register_outputs({
            "vpc_id": outputs.vpc_id,
            "vpc_cidr_block": outputs.vpc_cidr_block,
            "availability_zones": outputs.availability_zones,
            "public_subnet_ids": outputs.public_subnet_ids,
            "private_subnet_ids": outputs.private_subnet_ids,
            "public_subnet_cidrs": outputs.public_subnet_cidrs,
            "private_subnet_cidrs": outputs.private_subnet_cidrs,
            "internet_gateway_id": outputs.internet_gateway_id,
            "nat_gateway_ids": outputs.nat_gateway_ids,
            "nat_public_ips": outputs.nat_public_ips,
            "public_route_table_id": outputs.public_route_table_id,
            "private_route_table_ids": outputs.private_route_table_ids,
        })

    def _create_nat_gateways(self) -> None:
        """Create Elastic IPs and NAT gateways in the first public subnets."""
        self.nat_eips: list[aws.ec2.Eip] = []
        self.nat_gateways: list[aws.ec2.NatGateway] = []

        # NAT needs an attached IGW; the reference through subnet ids doesn't imply it
        nat_opts = pulumi.ResourceOptions(parent=self, depends_on=[self.igw])

        for index in range(self.config.nat_gateway_count):
            zone = self.zones[index]
            eip_name = self.namer.zonal("nat-eip", zone)
            nat_name = self.namer.zonal("nat", zone)

            eip = aws.ec2.Eip(
                eip_name,
                domain="vpc",
                tags=resource_tags(self.config, eip_name),
                opts=nat_opts,
            )
            nat = aws.ec2.NatGateway(
                nat_name,
                allocation_id=eip.id,
                subnet_id=self.public_subnets[index].id,
                tags=resource_tags(self.config, nat_name),
                opts=nat_opts,
            )
            self.nat_eips.append(eip)
            self.nat_gateways.append(nat)

        if not self.nat_gateways:
            pulumi.log.warn(
                "NAT gateways disabled: private subnets have no internet egress",
                resource=self,
            )
            return

        strategy = "single" if len(self.nat_gateways) == 1 else "one per zone"
        pulumi.log.info(
            f"Declaring {len(self.nat_gateways)} NAT gateway(s) ({strategy})",
            resource=self,
        )
        if self.config.is_production and len(self.nat_gateways) < len(self.zones):
            pulumi.log.warn(
                f"Production stack shares the NAT gateway in {self.zones[0]}: "
                "private egress of every zone depends on that zone",
                resource=self,
            )

    def _create_route_tables(self, opts: pulumi.ResourceOptions) -> None:
        """Create route tables for public and private subnets."""
        # Public route table (Internet Gateway)
        public_rt_name = self.namer.name("public-rt")
        self.public_rt = aws.ec2.RouteTable(
            public_rt_name,
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block=ANY_IPV4,
                    gateway_id=self.igw.id,
                ),
            ],
            tags=resource_tags(self.config, public_rt_name, Tier="public"),
            opts=opts,
        )

        self.route_table_associations: list[aws.ec2.RouteTableAssociation] = []
        for zone, subnet in zip(self.zones, self.public_subnets):
            self.route_table_associations.append(aws.ec2.RouteTableAssociation(
                self.namer.zonal("public-rt-assoc", zone),
                subnet_id=subnet.id,
                route_table_id=self.public_rt.id,
                opts=opts,
            ))

        # Private route tables, one per zone
        self.private_rts: list[aws.ec2.RouteTable] = []
        for index, (zone, subnet) in enumerate(zip(self.zones, self.private_subnets)):
            routes = []
            if self.nat_gateways:
                nat = self.nat_gateways[min(index, len(self.nat_gateways) - 1)]
                routes.append(
                    aws.ec2.RouteTableRouteArgs(
                        cidr_block=ANY_IPV4,
                        nat_gateway_id=nat.id,
                    )
                )

            private_rt_name = self.namer.zonal("private-rt", zone)
            private_rt = aws.ec2.RouteTable(
                private_rt_name,
                vpc_id=self.vpc.id,
                routes=routes,
                tags=resource_tags(self.config, private_rt_name, Tier="private"),
                opts=opts,
            )
            self.private_rts.append(private_rt)

            self.route_table_associations.append(aws.ec2.RouteTableAssociation(
                self.namer.zonal("private-rt-assoc", zone),
                subnet_id=subnet.id,
                route_table_id=private_rt.id,
                opts=opts,
            ))

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            vpc_cidr_block=self.vpc.cidr_block,
            availability_zones=list(self.zones),
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            private_subnet_ids=[subnet.id for subnet in self.private_subnets],
            public_subnet_cidrs=list(self.subnet_plan.public),
            private_subnet_cidrs=list(self.subnet_plan.private),
            internet_gateway_id=self.igw.id,
            nat_gateway_ids=[nat.id for nat in self.nat_gateways],
            nat_public_ips=[eip.public_ip for eip in self.nat_eips],
            public_route_table_id=self.public_rt.id,
            private_route_table_ids=[rt.id for rt in self.private_rts],
        )
