"""Test suite for bucket_credentials.

Test structure:
- unit/: Domain, application, and adapter tests with mocked or moto-backed AWS
- integration/: End-to-end credential lookups against moto-mocked S3 and KMS
"""
