"""Route 53 alias records for the distribution."""

from typing import Any, cast

from aws_cdk import aws_route53 as route53
from constructs import Construct

from ..overrides import apply_property_overrides


class CnameAlias(Construct):
  """CNAME records pointing the site's domain names at CloudFront.

  China-region hosted zones have no CloudFront alias target, so plain CNAMEs
  are used for the apex and every alternate name.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    hosted_zone: str,
    target_domain_name: str,
    domain_name: str,
    alternate_names: list[str] | None = None,
    hosted_zone_id: str | None = None,
    overrides: dict[str, Any] | None = None,
  ) -> None:
    super().__init__(scope, id)

    if hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "Zone",
        hosted_zone_id=hosted_zone_id,
        zone_name=hosted_zone,
      )
    else:
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "Zone",
        domain_name=hosted_zone,
      )

    self.records: list[route53.CnameRecord] = []
    for index, record_name in enumerate([domain_name, *(alternate_names or [])]):
      record = route53.CnameRecord(
        self,
        "Cname" if index == 0 else f"Cname{index}",
        zone=self.hosted_zone,
        domain_name=target_domain_name,
        record_name=record_name,
      )
      apply_property_overrides(cast(route53.CfnRecordSet, record.node.default_child), overrides)
      self.records.append(record)
