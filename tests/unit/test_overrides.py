"""Tests for merging overrides into default properties."""

from unittest.mock import MagicMock

from static_site_cn.overrides import apply_property_overrides, deep_merge, flatten_overrides


class TestDeepMerge:
  """Test deep_merge."""

  def test_override_wins(self) -> None:
    assert deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

  def test_nested_mappings_are_merged(self) -> None:
    base = {"cache": {"ttl": 360, "compress": True}, "enabled": True}
    merged = deep_merge(base, {"cache": {"ttl": 60}})

    assert merged == {"cache": {"ttl": 60, "compress": True}, "enabled": True}

  def test_lists_are_replaced(self) -> None:
    merged = deep_merge({"methods": ["GET", "HEAD"]}, {"methods": ["GET"]})

    assert merged == {"methods": ["GET"]}

  def test_inputs_are_not_mutated(self) -> None:
    base = {"cache": {"ttl": 360}}
    override = {"cache": {"ttl": 60}}
    deep_merge(base, override)

    assert base == {"cache": {"ttl": 360}}
    assert override == {"cache": {"ttl": 60}}


class TestFlattenOverrides:
  """Test flatten_overrides."""

  def test_nested_paths(self) -> None:
    overrides = {
      "DistributionConfig": {
        "Comment": "site",
        "DefaultCacheBehavior": {"DefaultTTL": 60},
        "Aliases": ["a.example.cn"],
      }
    }

    assert dict(flatten_overrides(overrides)) == {
      "DistributionConfig.Comment": "site",
      "DistributionConfig.DefaultCacheBehavior.DefaultTTL": 60,
      "DistributionConfig.Aliases": ["a.example.cn"],
    }

  def test_dots_in_keys_are_escaped(self) -> None:
    overrides = {"Tags": {"app.example.cn": "yes"}}

    assert list(flatten_overrides(overrides)) == [("Tags.app\\.example\\.cn", "yes")]

  def test_empty_mapping_is_a_leaf(self) -> None:
    assert list(flatten_overrides({"Metadata": {}})) == [("Metadata", {})]


class TestApplyPropertyOverrides:
  """Test apply_property_overrides."""

  def test_applies_every_leaf(self) -> None:
    resource = MagicMock()
    apply_property_overrides(resource, {"A": {"B": 1}, "C": 2})

    resource.add_property_override.assert_any_call("A.B", 1)
    resource.add_property_override.assert_any_call("C", 2)
    assert resource.add_property_override.call_count == 2

  def test_no_overrides(self) -> None:
    resource = MagicMock()
    apply_property_overrides(resource, None)
    apply_property_overrides(resource, {})

    resource.add_property_override.assert_not_called()

  def test_none_deletes_property(self) -> None:
    resource = MagicMock()
    apply_property_overrides(resource, {"DistributionConfig": {"Comment": None, "Enabled": True}})

    resource.add_property_deletion_override.assert_called_once_with("DistributionConfig.Comment")
    resource.add_property_override.assert_called_once_with("DistributionConfig.Enabled", True)
