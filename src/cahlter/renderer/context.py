"""Everything the page renderer needs, independent of how the content was summarized."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..models.config import Config
from ..models.content import Content
from ..utils.exceptions import InvalidChapterPath


class RenderContext(BaseModel):
    """Content model, vault configuration and source root of one build."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: Content
    config: Config
    src_root: Path

    def target(self, path: Path | str) -> str:
        """Return the site URL of a chapter's content file.

        /vault/src/dir/file.md with src_root /vault/src -> /dir/file.html

        Raises:
            InvalidChapterPath: If ``path`` is not under ``src_root``
        """
        # Summary links are normalized, so the root has to be as well
        path = Path(os.path.normpath(path))
        src_root = Path(os.path.normpath(self.src_root))
        try:
            relative = path.relative_to(src_root).with_suffix(".html")
        except ValueError as e:
            raise InvalidChapterPath(
                f"Chapter {path} is not inside the source directory {self.src_root}"
            ) from e
        return "/" + relative.as_posix()
