"""
VPC Topology Diagram.

Renders the topology a NetworkConfig declares: per-zone public and private
subnets, NAT gateways, the internet gateway, route tables and VPC endpoints.

Dependencies:
    pip install diagrams  (plus the Graphviz binaries)

Usage:
    python -m vpc_iac.architecture_diagram
    # Outputs: vpc_topology.png
"""

from diagrams import Cluster, Diagram, Edge
from diagrams.aws.general import Users
from diagrams.aws.network import (
    VPC,
    Endpoint,
    InternetGateway,
    NATGateway,
    PrivateSubnet,
    PublicSubnet,
    RouteTable,
    VPCElasticNetworkInterface,
)

from vpc_iac.configs.base import NetworkConfig
from vpc_iac.utils.cidr import plan_subnets

# Custom styling for detailed diagram
graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
    "height": "1.2",
    "width": "1.5",
}

edge_attr = {
    "fontsize": "9",
}


def render_topology(
    config: NetworkConfig,
    zones: tuple[str, ...],
    filename: str = "vpc_topology",
    show: bool = False,
) -> str:
    """
    Render the declared topology to ``{filename}.png``.

    Args:
        config: Network configuration to visualise
        zones: Availability zones the VPC spans
        filename: Output path without extension
        show: Open the rendered image

    Returns:
        Path of the rendered image
    """
    plan = plan_subnets(
        config.vpc_cidr,
        len(zones),
        config.subnet_newbits,
        public=config.public_subnet_cidrs,
        private=config.private_subnet_cidrs,
    )
    nat_count = config.nat_gateway_count

    with Diagram(
        f"{config.project}-{config.environment} VPC\n{config.vpc_cidr}",
        filename=filename,
        show=show,
        direction="TB",
        graph_attr=graph_attr,
        node_attr=node_attr,
        edge_attr=edge_attr,
    ):
        internet = Users("Internet")

        with Cluster(f"VPC: {config.vpc_cidr}"):
            VPC(f"VPC\n{config.vpc_cidr}")
            igw = InternetGateway("Internet Gateway")
            public_rt = RouteTable("Public RT\n0.0.0.0/0 → IGW")
            internet >> Edge(label="Inbound / Replies", color="orange", style="bold") >> igw
            igw >> Edge(color="orange") >> public_rt

            nat_gateways = []
            private_subnets = []
            for index, zone in enumerate(zones):
                with Cluster(f"Availability Zone: {zone}"):
                    public_subnet = PublicSubnet(f"Public Subnet\n{plan.public[index]}")
                    public_rt >> Edge(color="orange", style="dashed") >> public_subnet

                    if index < nat_count:
                        nat = NATGateway(f"NAT Gateway\nElastic IP\n{zone}")
                        public_subnet >> Edge(color="gray", style="dotted") >> nat
                        nat_gateways.append(nat)

                    private_subnet = PrivateSubnet(f"Private Subnet\n{plan.private[index]}")
                    private_subnets.append(private_subnet)

                    if nat_gateways:
                        nat = nat_gateways[min(index, len(nat_gateways) - 1)]
                        private_rt = RouteTable("Private RT\n0.0.0.0/0 → NAT")
                        private_rt >> Edge(label="Egress", color="green", style="bold") >> nat
                    else:
                        private_rt = RouteTable("Private RT\nlocal only")
                    private_rt >> Edge(color="green", style="dashed") >> private_subnet

            if config.enable_vpc_endpoints:
                with Cluster("VPC Endpoints"):
                    for service in config.gateway_endpoint_services:
                        gateway = Endpoint(f"{service}\nGateway Endpoint\nRoute Table Entry")
                        for private_subnet in private_subnets:
                            private_subnet >> Edge(color="purple", style="dashed") >> gateway
                    for service in config.interface_endpoint_services:
                        eni = VPCElasticNetworkInterface(
                            f"{service}\nInterface Endpoint\nPort 443\nprivate_dns: true"
                        )
                        for private_subnet in private_subnets:
                            private_subnet >> Edge(color="purple", style="dotted") >> eni

    return f"{filename}.png"


if __name__ == "__main__":
    example = NetworkConfig(environment="dev", enable_vpc_endpoints=True)
    output = render_topology(example, ("us-east-1a", "us-east-1b"))
    print(f"Diagram generated: {output}")
