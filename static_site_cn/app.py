#!/usr/bin/env python3
"""CDK application entry point for China-region static websites."""

import logging
import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_site_cn.config import Config, SiteConfig
from static_site_cn.stacks.site_stack import StaticSiteCnStack

logger = logging.getLogger(__name__)


def get_account_id(region: str) -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts", region_name=region)
  return str(sts.get_caller_identity()["Account"])


def resolve_account(site: SiteConfig) -> str:
  """Account for a site: explicit setting, CDK default, then STS."""
  return site.account or os.environ.get("CDK_DEFAULT_ACCOUNT") or get_account_id(site.region)


def stack_name_for(site: SiteConfig) -> str:
  return f"StaticSiteCn-{site.name.replace('.', '-').replace('_', '-')}"


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

  app = cdk.App()

  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))
  logger.info("Loaded %d site(s) from %s", len(config.sites), config_path)

  # Hosted zone lookups require an explicit account and region
  for site in config.sites:
    StaticSiteCnStack(
      app,
      stack_name_for(site),
      site_config=site,
      env=cdk.Environment(
        account=resolve_account(site),
        region=site.region,
      ),
      description=f"Static website {site.custom_domain.domain_name} in {site.region}",
    )

  app.synth()


if __name__ == "__main__":
  main()
