"""Upload of the built site assets."""

from pathlib import Path

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Deploys the contents of a local directory to the site bucket."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    source_dir: Path | str,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "BucketDeployment",
      sources=[s3_deploy.Source.asset(str(source_dir))],
      destination_bucket=bucket,
    )
