"""
Pulumi program entry point for the VPC network template.

Declares component resources in dependency order:
1. Configuration + availability zones
2. VPC → Subnets → Internet Gateway → NAT Gateways → Route Tables
3. Endpoint Security Group → VPC Endpoints (optional)
4. Stack exports
"""

import pulumi

from vpc_iac.configs.environment import get_config
from vpc_iac.utils.naming import ResourceNamer
from vpc_iac.utils.outputs import write_outputs_to_env
from vpc_iac.utils.zones import resolve_availability_zones

from vpc_iac.components.networking.vpc import VpcComponent
from vpc_iac.components.networking.security_groups import EndpointSecurityGroupComponent
from vpc_iac.components.networking.vpc_endpoints import VpcEndpointsComponent


def main() -> None:
    """Declare the VPC topology and export its identifiers."""
    # Load configuration
    config = get_config()
    namer = ResourceNamer(project=config.project, environment=config.environment)
    base_name = namer.prefix

    zones = resolve_availability_zones(config)
    pulumi.log.info(
        f"VPC {config.vpc_cidr} across {', '.join(zones)} "
        f"with {config.nat_gateway_count} NAT gateway(s)"
    )

    # --- Layer 1: Network foundation ---
    vpc = VpcComponent(
        name=base_name,
        config=config,
        zones=zones,
        namer=namer,
    )
    vpc_outputs = vpc.get_outputs()

    outputs: dict[str, pulumi.Input] = {
        "vpc_id": vpc_outputs.vpc_id,
        "vpc_cidr_block": vpc_outputs.vpc_cidr_block,
        "availability_zones": vpc_outputs.availability_zones,
        "public_subnet_ids": vpc_outputs.public_subnet_ids,
        "private_subnet_ids": vpc_outputs.private_subnet_ids,
        "public_subnet_cidrs": vpc_outputs.public_subnet_cidrs,
        "private_subnet_cidrs": vpc_outputs.private_subnet_cidrs,
        "internet_gateway_id": vpc_outputs.internet_gateway_id,
        "nat_gateway_ids": vpc_outputs.nat_gateway_ids,
        "nat_public_ips": vpc_outputs.nat_public_ips,
        "public_route_table_id": vpc_outputs.public_route_table_id,
        "private_route_table_ids": vpc_outputs.private_route_table_ids,
    }

    # --- Layer 2: VPC Endpoints ---
    if config.enable_vpc_endpoints:
        endpoints_sg = EndpointSecurityGroupComponent(
            name=base_name,
            config=config,
            vpc_id=vpc_outputs.vpc_id,
            vpc_cidr=vpc_outputs.vpc_cidr_block,
            namer=namer,
        )
        sg_outputs = endpoints_sg.get_outputs()

        vpc_endpoints = VpcEndpointsComponent(
            name=base_name,
            config=config,
            vpc_id=vpc_outputs.vpc_id,
            subnet_ids=vpc_outputs.private_subnet_ids,
            security_group_id=sg_outputs.security_group_id,
            route_table_ids=vpc_outputs.private_route_table_ids,
            namer=namer,
        )
        endpoint_outputs = vpc_endpoints.get_outputs()

        outputs["endpoints_security_group_id"] = sg_outputs.security_group_id
        outputs["gateway_endpoint_ids"] = endpoint_outputs.gateway_endpoint_ids
        outputs["interface_endpoint_ids"] = endpoint_outputs.interface_endpoint_ids

    # Write outputs to an env file for local tooling
    if config.outputs_env_file:
        write_outputs_to_env(outputs, config.outputs_env_file)

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
