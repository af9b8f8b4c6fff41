"""Vault lifecycle: initialization, loading and building."""

import logging
import shutil
from pathlib import Path

from ..models.config import CONFIG_FILE, Config
from ..models.content import Content
from ..renderer.context import RenderContext
from ..utils.exceptions import VaultError, WriteFailed
from .builder import SiteBuilder


logger = logging.getLogger("Cahlter.Vault")

ASSETS_DIR = Path(__file__).parent.parent / "assets"
DEFAULT_ASSETS = ("main.css", "index.js")


class Vault:
    """A site project: markdown sources plus a cahlter.yml configuration."""

    def __init__(self, path: Path | str, config: Config | None = None):
        self.path = Path(path)
        self.config = config if config is not None else Config()

    @classmethod
    def from_disk(cls, path: Path | str) -> "Vault":
        """Load the vault at ``path`` using its cahlter.yml."""
        path = Path(path)
        return cls(path, Config.from_disk(path / CONFIG_FILE))

    @property
    def config_file(self) -> Path:
        return self.path / CONFIG_FILE

    @property
    def src_dir(self) -> Path:
        return self.path / self.config.general.src_dir

    @property
    def build_dir(self) -> Path:
        return self.path / self.config.general.build_dir

    def was_initialized(self) -> bool:
        return self.config_file.exists()

    def init(self) -> None:
        """
        Create a new vault on disk.

        The title defaults to the name of the vault's directory.

        Raises:
            VaultError: If the vault already has a cahlter.yml
        """
        if self.was_initialized():
            raise VaultError(f"{CONFIG_FILE} already exists at {self.path}")

        for directory in (self.path, self.src_dir, self.build_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise VaultError(f"Could not create {directory}: {e}") from e

        self.config.general.title = self.path.resolve().name
        self.config.save(self.config_file)
        logger.debug("Initialized vault at %s", self.path)

    def build(self) -> list[Path]:
        """
        Build the site into the build directory.

        The content is summarized from scratch on every call.

        Returns:
            Paths of the written pages
        """
        content = Content.from_path(self.src_dir, ignore=tuple(self.config.general.ignore))
        context = RenderContext(content=content, config=self.config, src_root=self.src_dir)

        pages = SiteBuilder(context).build(content, self.build_dir)
        logger.debug("Wrote %d pages to %s", len(pages), self.build_dir)

        if self.config.general.use_default:
            for name in DEFAULT_ASSETS:
                self._copy(ASSETS_DIR / name, self.build_dir / name)

        # Custom stylesheets are flattened into the build root
        for css_file in self.config.appearance.custom:
            self._copy(self.path / css_file, self.build_dir / Path(css_file).name)

        return pages

    @staticmethod
    def _copy(source: Path, destination: Path) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            raise WriteFailed(f"Could not copy {source} to {destination}: {e}") from e
