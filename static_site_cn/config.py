"""Configuration loader for China-region static sites."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .overrides import deep_merge

REDIRECT_TO_INDEX_PAGE = "redirect_to_index_page"


@dataclass
class DomainConfig:
  """Custom domain served by the distribution."""

  domain_name: str
  iam_certificate_id: str
  hosted_zone: str | None = None
  hosted_zone_id: str | None = None
  is_external_domain: bool = False  # DNS is managed outside Route 53
  alternate_names: list[str] = field(default_factory=list)


@dataclass
class SiteOverrides:
  """CloudFormation-shaped properties merged over the construct defaults."""

  bucket: dict[str, Any] = field(default_factory=dict)
  distribution: dict[str, Any] = field(default_factory=dict)
  record: dict[str, Any] = field(default_factory=dict)


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  name: str
  path: str
  custom_domain: DomainConfig
  index_page: str = "index.html"
  error_page: str | None = None  # page name or "redirect_to_index_page"
  build_command: str | None = None
  build_output: str | None = None
  environment: dict[str, str] = field(default_factory=dict)
  purge_files: bool = False
  region: str = "cn-north-1"
  account: str | None = None
  overrides: SiteOverrides = field(default_factory=SiteOverrides)


def _require(data: dict[str, Any], key: str, where: str) -> Any:
  if not data.get(key):
    raise ConfigurationError(f"Missing required setting '{key}' for {where}.")
  return data[key]


def _mapping(value: Any, what: str) -> dict[str, Any]:
  if not isinstance(value, dict):
    raise ConfigurationError(f"Expected a mapping for {what}, got {type(value).__name__}.")
  return value


def _account(value: Any, where: str) -> str | None:
  if value is None or value == "":
    return None
  # Unquoted IDs are parsed as numbers and lose leading zeros
  if not isinstance(value, str):
    raise ConfigurationError(f"Setting 'account' for {where} must be a quoted string.")
  return value


def _parse_domain(data: dict[str, Any], where: str) -> DomainConfig:
  return DomainConfig(
    domain_name=_require(data, "domain_name", where),
    iam_certificate_id=_require(data, "iam_certificate_id", where),
    hosted_zone=data.get("hosted_zone"),
    hosted_zone_id=data.get("hosted_zone_id"),
    is_external_domain=bool(data.get("is_external_domain", False)),
    alternate_names=list(data.get("alternate_names") or []),
  )


def _parse_site(data: dict[str, Any]) -> SiteConfig:
  name = _require(data, "name", "site")
  where = f"site '{name}'"
  custom_domain = _mapping(
    _require(data, "custom_domain", where), f"'custom_domain' of {where}"
  )
  overrides = _mapping(data.get("overrides") or {}, f"'overrides' of {where}")

  return SiteConfig(
    name=name,
    path=str(_require(data, "path", where)),
    custom_domain=_parse_domain(custom_domain, where),
    index_page=data.get("index_page") or "index.html",
    error_page=data.get("error_page"),
    build_command=data.get("build_command"),
    build_output=data.get("build_output"),
    environment={k: str(v) for k, v in (data.get("environment") or {}).items()},
    purge_files=bool(data.get("purge_files", False)),
    region=data.get("region", "cn-north-1"),
    account=_account(data.get("account"), where),
    overrides=SiteOverrides(
      bucket=overrides.get("bucket") or {},
      distribution=overrides.get("distribution") or {},
      record=overrides.get("record") or {},
    ),
  )


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Every entry under ``sites`` is deep-merged over ``defaults``, so nested
    settings such as ``custom_domain`` or ``overrides`` can be shared.
    """
    with open(path) as f:
      try:
        data = yaml.safe_load(f) or {}
      except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    data = _mapping(data, f"the top level of {path}")
    defaults = _mapping(data.get("defaults") or {}, "'defaults'")

    sites: list[SiteConfig] = []
    for index, site in enumerate(data.get("sites") or []):
      site = _mapping(site, f"site #{index + 1}")
      sites.append(_parse_site(deep_merge(defaults, site)))
    return cls(sites=sites)
