"""Bucket credentials: S3-stored, KMS-encrypted username/password credentials.

Fetches an encrypted blob from an S3 bucket, decrypts it with AWS KMS, and
exposes the result as a username + password identity for a host
application's credential lookup.

Usage:
    from bucket_credentials.application import BucketCredentials

    credentials = BucketCredentials.create(
        scope="GLOBAL",
        region="eu-west-1",
        bucket_name="creds-bucket",
        bucket_path="svc/api-key.enc",
        username="svc-deploy",
    )
    credentials.display_name()  # "creds-bucket:svc/api-key.enc"
    secret = credentials.password()  # blocking S3 + KMS round trip
"""

__version__ = "0.1.0"
