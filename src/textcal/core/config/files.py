"""
TOML file access for the configuration manager.

Every OS or syntax failure comes back as a ConfigurationFileError naming the
file and what was being done with it.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from ...exceptions.config import ConfigurationFileError

logger = logging.getLogger(__name__)


def read_toml(path: Path) -> Dict[str, Any]:
    """Parse a TOML configuration file into a plain dictionary."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigurationFileError(path, "read", "file not found") from None
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationFileError(path, "parse", f"invalid TOML syntax ({e})") from e
    except OSError as e:
        raise ConfigurationFileError(path, "read", e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} configuration sections from {path}")
    return data


def write_toml(path: Path, data: Dict[str, Any]) -> None:
    """Write ``data`` as TOML, creating the parent directory when needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump(data, f)
    except OSError as e:
        raise ConfigurationFileError(path, "write", e.strerror or str(e)) from e

    logger.debug(f"Wrote configuration to {path}")
