"""Private S3 bucket holding the site assets."""

from typing import Any, cast

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..overrides import apply_property_overrides


class PrivateBucket(Construct):
  """S3 bucket with all public access blocked; readable only through CloudFront."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    index_page: str = "index.html",
    overrides: dict[str, Any] | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      auto_delete_objects=True,
      removal_policy=RemovalPolicy.DESTROY,
      website_index_document=index_page,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=True,
        block_public_policy=True,
        ignore_public_acls=True,
        restrict_public_buckets=True,
      ),
    )

    apply_property_overrides(cast(s3.CfnBucket, self.bucket.node.default_child), overrides)
