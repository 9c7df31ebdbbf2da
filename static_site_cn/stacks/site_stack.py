"""CDK stack for a single China-region static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_site_cn.cdk_constructs import StaticSiteCn
from static_site_cn.config import SiteConfig


class StaticSiteCnStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteCn(
      self,
      "Site",
      custom_domain=site_config.custom_domain,
      path=site_config.path,
      index_page=site_config.index_page,
      error_page=site_config.error_page,
      build_command=site_config.build_command,
      build_output=site_config.build_output,
      environment=site_config.environment,
      purge_files=site_config.purge_files,
      overrides=site_config.overrides,
    )

    cdk.Tags.of(self).add("Project", "static-sites-cn")
    cdk.Tags.of(self).add("Site", site_config.name)
    cdk.Tags.of(self).add("Domain", site_config.custom_domain.domain_name)
