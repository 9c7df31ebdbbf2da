"""CDK stacks for China-region static websites."""

from .site_stack import StaticSiteCnStack

__all__ = ["StaticSiteCnStack"]
