"""Merge caller-supplied overrides into default resource properties."""

from collections.abc import Iterator, Mapping
from typing import Any

from aws_cdk import CfnResource


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
  """Return ``base`` with ``override`` merged on top.

  Nested mappings are merged key by key. Any other value in ``override``,
  lists included, replaces the value in ``base``. Neither input is modified.
  """
  merged = dict(base)
  for key, value in override.items():
    current = merged.get(key)
    if isinstance(current, Mapping) and isinstance(value, Mapping):
      merged[key] = deep_merge(current, value)
    else:
      merged[key] = value
  return merged


def _escape(key: str) -> str:
  # add_property_override treats "." as a path separator
  return key.replace(".", "\\.")


def flatten_overrides(
  overrides: Mapping[str, Any], prefix: str = ""
) -> Iterator[tuple[str, Any]]:
  """Yield ``(path, value)`` pairs for every leaf of a nested override mapping."""
  for key, value in overrides.items():
    path = f"{prefix}.{_escape(key)}" if prefix else _escape(key)
    if isinstance(value, Mapping) and value:
      yield from flatten_overrides(value, path)
    else:
      yield path, value
def apply_property_overrides(
  resource: CfnResource, overrides: Mapping[str, Any] | None
) -> None:
  """Apply CloudFormation-shaped overrides to an L1 resource.

  Keys use CloudFormation property names (``DistributionConfig``,
  ``BucketName``...). The synthesized properties end up as the resource
  defaults deep-merged with ``overrides``, except that a ``None`` leaf
  (``~`` in YAML) removes the property from the resource.
  """
  if not overrides:
    return
  for path, value in flatten_overrides(overrides):
    if value is None:
      resource.add_property_deletion_override(path)
    else:
      resource.add_property_override(path, value)
