"""Config file discovery and loading.

Walk-up finder locates jobteardown.toml, similar to how git finds .git/.
Supports the JOBTEARDOWN_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from jobteardown.config.models import JobTeardownConfig

CONFIG_FILENAME = "jobteardown.toml"
CONFIG_ENV_VAR = "JOBTEARDOWN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for jobteardown.toml.

    JOBTEARDOWN_CONFIG wins when set; a dangling value means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> JobTeardownConfig:
    """Load and validate config from a TOML file.

    Returns defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return JobTeardownConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return JobTeardownConfig.model_validate(data)
