"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from static_site_cn.config import DomainConfig

ACCOUNT = "123456789012"


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack in a China region for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(account=ACCOUNT, region="cn-north-1"))


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
  """Create a directory with a minimal static site."""
  (tmp_path / "index.html").write_text("<html><body>hello</body></html>")
  return tmp_path


@pytest.fixture
def custom_domain() -> DomainConfig:
  """Domain settings with a hosted zone imported by id."""
  return DomainConfig(
    domain_name="www.example.cn",
    iam_certificate_id="ASCAEXAMPLECERT",
    hosted_zone="example.cn",
    hosted_zone_id="Z0123456789",
  )
