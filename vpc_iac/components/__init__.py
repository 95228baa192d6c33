"""
Pulumi component resources for the VPC template.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, gateways, route tables, endpoint security group, VPC endpoints
"""
