"""boto3 client factory shared by the S3 and KMS adapters.

Timeouts and retry behavior come from Settings so a blocking password
lookup can be bounded by the host. Retries use botocore's own backoff
with jitter; attempts=1 restores fail-fast behavior.
"""

from typing import Any

import boto3
from botocore.config import Config

from bucket_credentials.core.config import Settings
from bucket_credentials.domain.enums import AwsRegion


def build_client_config(settings: Settings) -> Config:
    """Build botocore client configuration from settings.

    Args:
        settings: Runtime settings.

    Returns:
        Config: Timeouts and retry policy for AWS clients.
    """
    return Config(
        connect_timeout=settings.aws_connect_timeout,
        read_timeout=settings.aws_read_timeout,
        retries={
            "max_attempts": settings.aws_max_attempts,
            "mode": settings.aws_retry_mode,
        },
    )


def create_aws_client(service_name: str, region: AwsRegion, settings: Settings) -> Any:
    """Create a boto3 client for one service in one region.

    Uses the default credential provider chain (environment, shared
    config, instance profile).

    Args:
        service_name: 's3' or 'kms'.
        region: Resolved region.
        settings: Runtime settings (timeouts, retries, endpoint).

    Returns:
        boto3 client.
    """
    return boto3.client(
        service_name,
        region_name=region.value,
        endpoint_url=settings.aws_endpoint_url,
        config=build_client_config(settings),
    )
