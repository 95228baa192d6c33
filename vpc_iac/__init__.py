"""
Pulumi infrastructure-as-code for an AWS VPC network.

This package declares:
- VPC with public and private subnets in each availability zone
- Internet gateway and NAT gateways with elastic IPs
- Public and per-zone private route tables with associations
- Optional gateway/interface VPC endpoints and their security group
"""
