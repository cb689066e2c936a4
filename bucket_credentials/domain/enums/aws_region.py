"""Known AWS regions.

A credential's region must resolve to one of these before any S3 or KMS
client is built, so a typo fails when the credential is configured rather
than on first password lookup.

Accepted spellings:
    - Region id: 'us-east-1'
    - Enum name: 'US_EAST_1' (the form host configuration forms store)
"""

from enum import Enum


class AwsRegion(str, Enum):
    """AWS regions the credential clients can target."""

    US_GOV_WEST_1 = "us-gov-west-1"
    US_GOV_EAST_1 = "us-gov-east-1"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    EU_CENTRAL_1 = "eu-central-1"
    EU_CENTRAL_2 = "eu-central-2"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_SOUTH_2 = "eu-south-2"
    AP_EAST_1 = "ap-east-1"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTH_2 = "ap-south-2"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTHEAST_3 = "ap-southeast-3"
    AP_SOUTHEAST_4 = "ap-southeast-4"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    SA_EAST_1 = "sa-east-1"
    CN_NORTH_1 = "cn-north-1"
    CN_NORTHWEST_1 = "cn-northwest-1"
    CA_CENTRAL_1 = "ca-central-1"
    ME_SOUTH_1 = "me-south-1"
    ME_CENTRAL_1 = "me-central-1"
    AF_SOUTH_1 = "af-south-1"
    IL_CENTRAL_1 = "il-central-1"

    @classmethod
    def from_identifier(cls, identifier: "str | AwsRegion | None") -> "AwsRegion | None":
        """Resolve a region from its id or enum name.

        Args:
            identifier: 'eu-west-1', 'EU_WEST_1', or an AwsRegion.

        Returns:
            Matching region, or None if the identifier is unknown or empty.

        Example:
            >>> AwsRegion.from_identifier("US_EAST_1")
            <AwsRegion.US_EAST_1: 'us-east-1'>
            >>> AwsRegion.from_identifier("mars-north-1") is None
            True
        """
        if identifier is None:
            return None
        if isinstance(identifier, cls):
            return identifier

        candidate = str(identifier).strip()
        if candidate in cls.__members__:
            return cls[candidate]
        try:
            return cls(candidate.lower())
        except ValueError:
            return None
