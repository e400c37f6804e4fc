"""Store location resolution.

Precedence: explicit path (the --file option), then the STUDENTSTORE_FILE
environment variable, then Students.bin in the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

ENV_VAR = "STUDENTSTORE_FILE"
DEFAULT_FILENAME = "Students.bin"


def resolve_store_path(override: Optional[str] = None) -> Path:
    """Pick the store file path. Empty strings count as unset."""
    if override:
        return Path(override).expanduser()
    from_env = os.environ.get(ENV_VAR, "")
    if from_env:
        return Path(from_env).expanduser()
    return Path(DEFAULT_FILENAME)
