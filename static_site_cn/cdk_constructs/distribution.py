"""CloudFront distribution for a static site in a China region."""

from typing import Any

from aws_cdk import Stack, Token
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct

from ..config import REDIRECT_TO_INDEX_PAGE
from ..overrides import apply_property_overrides

CfnDistribution = cloudfront.CfnDistribution


def is_china_region(region: str) -> bool:
  """True for a concrete ``cn-*`` region; unresolved tokens count as global."""
  return not Token.is_unresolved(region) and region.startswith("cn")


def bucket_origin_domain(bucket: s3.IBucket, region: str) -> str:
  """Domain CloudFront uses to reach the bucket."""
  if is_china_region(region):
    return f"{bucket.bucket_name}.s3.{region}.amazonaws.com.cn"
  return bucket.bucket_domain_name


def error_responses(
  error_page: str | None, index_page: str
) -> list[CfnDistribution.CustomErrorResponseProperty] | None:
  """Map 403/404 from the private bucket to the configured error page."""
  if not error_page:
    return None
  if error_page == REDIRECT_TO_INDEX_PAGE:
    path, code = f"/{index_page}", 200
  else:
    path, code = f"/{error_page.lstrip('/')}", 404
  return [
    CfnDistribution.CustomErrorResponseProperty(
      error_code=status,
      response_code=code,
      response_page_path=path,
    )
    for status in (403, 404)
  ]


class ChinaDistribution(Construct):
  """L1 CloudFront distribution using an IAM server certificate.

  The L2 ``Distribution`` needs ACM certificates and origin access control,
  neither of which CloudFront offers in the China partition.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    origin_access_identity: str,
    domain_name: str,
    iam_certificate_id: str,
    alternate_names: list[str] | None = None,
    index_page: str = "index.html",
    error_page: str | None = None,
    overrides: dict[str, Any] | None = None,
  ) -> None:
    super().__init__(scope, id)

    region = Stack.of(self).region
    origin_id = bucket.bucket_name

    self.distribution = CfnDistribution(
      self,
      "Distribution",
      distribution_config=CfnDistribution.DistributionConfigProperty(
        aliases=[domain_name, *(alternate_names or [])],
        origins=[
          CfnDistribution.OriginProperty(
            id=origin_id,
            domain_name=bucket_origin_domain(bucket, region),
            connection_attempts=3,
            connection_timeout=10,
            s3_origin_config=CfnDistribution.S3OriginConfigProperty(
              origin_access_identity=origin_access_identity,
            ),
          )
        ],
        origin_groups=CfnDistribution.OriginGroupsProperty(quantity=0),
        default_cache_behavior=CfnDistribution.DefaultCacheBehaviorProperty(
          target_origin_id=origin_id,
          viewer_protocol_policy="redirect-to-https",
          allowed_methods=["HEAD", "GET"],
          cached_methods=["HEAD", "GET"],
          compress=True,
          default_ttl=360,
          max_ttl=3600,
          min_ttl=0,
          forwarded_values=CfnDistribution.ForwardedValuesProperty(query_string=True),
          smooth_streaming=False,
        ),
        custom_error_responses=error_responses(error_page, index_page),
        comment=f"Static site {domain_name}",
        enabled=True,
        restrictions=CfnDistribution.RestrictionsProperty(
          geo_restriction=CfnDistribution.GeoRestrictionProperty(restriction_type="none"),
        ),
        http_version="http1.1",
        default_root_object=index_page,
        ipv6_enabled=not is_china_region(region),
        viewer_certificate=CfnDistribution.ViewerCertificateProperty(
          iam_certificate_id=iam_certificate_id,
          minimum_protocol_version="TLSv1",
          ssl_support_method="sni-only",
        ),
      ),
    )

    apply_property_overrides(self.distribution, overrides)

  @property
  def distribution_id(self) -> str:
    return self.distribution.ref

  @property
  def domain_name(self) -> str:
    return self.distribution.attr_domain_name
