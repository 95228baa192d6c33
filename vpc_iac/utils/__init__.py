"""
Utility functions for the VPC template.

Provides naming conventions, tag factories, CIDR planning, zone selection
and output utilities.
"""

from vpc_iac.utils.naming import ResourceNamer
from vpc_iac.utils.tags import create_tags, merge_tags, resource_tags
from vpc_iac.utils.cidr import SubnetPlan, cidrsubnet, plan_subnets
from vpc_iac.utils.zones import resolve_availability_zones, select_zones
from vpc_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "resource_tags",
    "SubnetPlan",
    "cidrsubnet",
    "plan_subnets",
    "resolve_availability_zones",
    "select_zones",
    "write_outputs_to_env",
]
