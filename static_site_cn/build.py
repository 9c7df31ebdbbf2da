"""Run a site's local build command before its assets are uploaded."""

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping
from pathlib import Path

from .exceptions import BuildError, ConfigurationError

logger = logging.getLogger(__name__)


def run_build(
  path: Path | str,
  *,
  build_command: str | None,
  build_output: str | None,
  environment: Mapping[str, str] | None = None,
  purge_files: bool = False,
) -> Path:
  """Build the site at ``path`` and return the directory to upload.

  Without a build command nothing runs and ``path`` itself is returned.
  The command runs through the shell with ``path`` as working directory,
  inheriting stdout/stderr, and with ``environment`` layered over the
  current process environment.
  """
  if not build_command:
    return Path(path)

  if not build_output:
    raise ConfigurationError("Must set build_output if build_command exists.")

  source_dir = Path(path) / build_output

  if purge_files and source_dir.exists():
    logger.info("Removing previous build output %s", source_dir)
    shutil.rmtree(source_dir)

  env = {**os.environ, **(environment or {})}

  logger.info("Building static site %s", path)
  try:
    subprocess.run(build_command, shell=True, check=True, cwd=str(path), env=env)
  except (OSError, subprocess.CalledProcessError) as e:
    raise BuildError(f"There was a problem building the static site at {path}: {e}") from e

  logger.info("Build finished, uploading from %s", source_dir)
  return source_dir
