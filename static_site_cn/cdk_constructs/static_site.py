"""Main composite construct for a static website in a China region."""

from collections.abc import Mapping
from pathlib import Path

from aws_cdk import CfnOutput
from aws_cdk import aws_route53 as route53
from constructs import Construct

from ..build import run_build
from ..config import DomainConfig, SiteOverrides
from ..exceptions import ConfigurationError
from .content import SiteContent
from .distribution import ChinaDistribution
from .dns import CnameAlias
from .origin_access import OriginAccess
from .storage import PrivateBucket


class StaticSiteCn(Construct):
  """Complete static website infrastructure for the China partition.

  Creates:
  - (Optional) Local build of the site via a shell command
  - Private S3 bucket with the site assets
  - CloudFront origin access identity with read access to the bucket
  - CloudFront distribution using an IAM server certificate
  - (Optional) Route 53 CNAME records, unless DNS is managed externally
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    custom_domain: DomainConfig,
    path: Path | str,
    index_page: str = "index.html",
    error_page: str | None = None,
    build_command: str | None = None,
    build_output: str | None = None,
    environment: Mapping[str, str] | None = None,
    purge_files: bool = False,
    overrides: SiteOverrides | None = None,
  ) -> None:
    super().__init__(scope, id)

    if not custom_domain.domain_name:
      raise ConfigurationError("Must set domain_name in china region.")

    if not Path(path).exists():
      raise ConfigurationError(f'No path found at "{path}" for StaticSiteCn.')

    if build_command and not build_output:
      raise ConfigurationError("Must set build_output if build_command exists.")

    if not custom_domain.is_external_domain and not custom_domain.hosted_zone:
      raise ConfigurationError(
        "Must set hosted_zone in china region if is_external_domain is disabled."
      )

    overrides = overrides or SiteOverrides()
    self.domain_name = custom_domain.domain_name
    self.iam_certificate_id = custom_domain.iam_certificate_id

    source_dir = run_build(
      path,
      build_command=build_command,
      build_output=build_output,
      environment=environment,
      purge_files=purge_files,
    )

    self.storage = PrivateBucket(
      self,
      "Storage",
      index_page=index_page,
      overrides=overrides.bucket,
    )
    self.bucket = self.storage.bucket

    self.content = SiteContent(
      self,
      "Content",
      bucket=self.bucket,
      source_dir=source_dir,
    )

    self.origin_access = OriginAccess(self, "OriginAccess", bucket=self.bucket)

    self.distribution = ChinaDistribution(
      self,
      "Cdn",
      bucket=self.bucket,
      origin_access_identity=self.origin_access.s3_origin_identity,
      domain_name=self.domain_name,
      iam_certificate_id=self.iam_certificate_id,
      alternate_names=custom_domain.alternate_names,
      index_page=index_page,
      error_page=error_page,
      overrides=overrides.distribution,
    )
    self.cfn_distribution = self.distribution.distribution

    self.dns: CnameAlias | None = None
    if not custom_domain.is_external_domain:
      self.dns = CnameAlias(
        self,
        "Dns",
        hosted_zone=custom_domain.hosted_zone,
        hosted_zone_id=custom_domain.hosted_zone_id,
        target_domain_name=self.distribution.domain_name,
        domain_name=self.domain_name,
        alternate_names=custom_domain.alternate_names,
        overrides=overrides.record,
      )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.domain_name,
      description="CloudFront distribution domain name",
    )

  @property
  def records(self) -> list[route53.CnameRecord]:
    """CNAME records created for the site; empty for external domains."""
    return self.dns.records if self.dns else []
