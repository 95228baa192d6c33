"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}[-{zone suffix}]
"""

from dataclasses import dataclass


def zone_suffix(zone: str) -> str:
    """
    Return the trailing letter(s) that distinguish a zone within its region.

    Args:
        zone: Availability zone name (e.g., 'us-east-1a', 'us-west-2-lax-1a')

    Returns:
        Zone suffix ('a'), or the full zone name if it has no letter suffix
    """
    stripped = zone.rstrip("abcdefghijklmnopqrstuvwxyz")
    suffix = zone[len(stripped):]
    return suffix or zone


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def prefix(self) -> str:
        """Shared prefix of every resource name."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'igw')

        Returns:
            Formatted resource name
        """
        return f"{self.prefix}-{resource}"

    def zonal(self, resource: str, zone: str) -> str:
        """
        Generate a name for a resource that exists once per availability zone.

        Args:
            resource: Resource identifier (e.g., 'public-subnet', 'nat')
            zone: Availability zone the resource lives in

        Returns:
            Formatted resource name ending in the zone suffix
        """
        return f"{self.prefix}-{resource}-{zone_suffix(zone)}"
