"""Errors raised while configuring or building a static site."""


class StaticSiteError(Exception):
  """Base class for static site errors."""


class ConfigurationError(StaticSiteError, ValueError):
  """A required setting is missing or inconsistent."""


class BuildError(StaticSiteError):
  """The local build command did not complete."""
