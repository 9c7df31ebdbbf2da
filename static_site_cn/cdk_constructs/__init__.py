"""CDK constructs for China-region static website infrastructure."""

from .content import SiteContent
from .distribution import ChinaDistribution
from .dns import CnameAlias
from .origin_access import OriginAccess
from .static_site import StaticSiteCn
from .storage import PrivateBucket

__all__ = [
  "ChinaDistribution",
  "CnameAlias",
  "OriginAccess",
  "PrivateBucket",
  "SiteContent",
  "StaticSiteCn",
]
