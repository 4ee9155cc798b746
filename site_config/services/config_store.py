"""Config store — JSON documents on disk, one file per generated config.

Writes go to a temp file in the same directory and are moved into place with
os.replace, so a reader never sees a half-written document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from site_config.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class ConfigFileHandler:
    """Read / write / exists / remove for config documents under one base directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        """Resolve a file name under the base directory."""
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise InvalidArgumentError(f"Unsafe config file name: {name!r}")
        return self.base_path / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> dict:
        """Load a document. Returns {} when missing or not a JSON object."""
        path = self.path_for(name)
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Config READ failed | file=%s | %s", name, str(e)[:100])
            return {}
        if not isinstance(data, dict):
            logger.warning("Config READ ignored non-object document | file=%s", name)
            return {}
        return data

    def write(self, name: str, data: dict) -> bool:
        """Serialize `data` to `name`, replacing any previous document."""
        path = self.path_for(name)
        tmp_name = None
        try:
            payload = json.dumps(data, ensure_ascii=False, indent=2, default=str)
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{name}.", delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Config WRITE failed | file=%s | %s", name, str(e)[:200])
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

        logger.info("Config WRITE | file=%s | keys=%d", name, len(data))
        return True

    def remove(self, name: str) -> bool:
        """Delete a document. Returns False when it did not exist."""
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Config REMOVE | file=%s", name)
        return True
