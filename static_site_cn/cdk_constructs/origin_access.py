"""CloudFront origin access identity for the private bucket."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct


class OriginAccess(Construct):
  """Origin access identity granted read access to the bucket.

  China regions do not support origin access control, so the distribution
  reads the bucket through a legacy OAI.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
  ) -> None:
    super().__init__(scope, id)

    self.identity = cloudfront.OriginAccessIdentity(self, "OriginAccessIdentity")
    bucket.grant_read(self.identity)

  @property
  def s3_origin_identity(self) -> str:
    """Value for an S3 origin's ``OriginAccessIdentity`` setting."""
    return f"origin-access-identity/cloudfront/{self.identity.origin_access_identity_id}"
