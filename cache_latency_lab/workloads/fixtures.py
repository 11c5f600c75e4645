"""
Read-only access to static fixture files.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_FIXTURES_DIR
from ..errors import FixtureLoadError

logger = logging.getLogger(__name__)

WEBPAGE_FIXTURE = "news-article.html"


class FixtureStore:
    """Loads named files from a fixtures directory."""

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root) if root is not None else DEFAULT_FIXTURES_DIR

    def path_for(self, name: str) -> Path:
        return self.root / name

    def read(self, name: str) -> str:
        """Return the text of a fixture file.

        Raises:
            FixtureLoadError: if the file is missing or unreadable.
        """
        path = self.path_for(name)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FixtureLoadError(path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FixtureLoadError(path, str(exc)) from exc

        logger.debug("Loaded fixture %s (%d chars)", path, len(content))
        return content
