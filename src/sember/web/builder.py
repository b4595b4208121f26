"""
Build the whole site: pages, bundled static assets and the optional photo.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List, Optional

from ..config import Config
from ..errors import AssetError, BuildError
from ..render import PAGE_NAMES, TemplateStore, render_page
from ..util import build_lock, ensure_directory, is_relative_to, remove_tree, write_bytes_file, write_text_file

logger = logging.getLogger(__name__)

ASSETS_PACKAGE = "sember"
ASSETS_DIRNAME = "assets"
BINARY_SUFFIXES = {".woff", ".woff2", ".ttf", ".otf", ".png", ".jpg", ".jpeg", ".gif", ".ico"}


@dataclass
class BuildReport:
    """
    Stores what a build wrote.

    Attributes:
        root: The output directory.
        previous_removed: True if an earlier output tree was deleted first.
        pages_written: HTML files written, in build order.
        assets_copied: Static assets copied from the package.
        photo_copied: Destination of the user's photo, if one was copied.
    """
    root: Path
    previous_removed: bool = False
    pages_written: List[Path] = field(default_factory=list)
    assets_copied: List[Path] = field(default_factory=list)
    photo_copied: Optional[Path] = None

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Output", str(self.root))
        yield ("Previous output removed", "yes" if self.previous_removed else "no")
        yield ("Pages written", str(len(self.pages_written)))
        yield ("Assets copied", str(len(self.assets_copied)))
        yield ("Photo", str(self.photo_copied) if self.photo_copied else "none")


def page_destination(output_dir: Path, page_name: str) -> Path:
    """
    Map a page name to its output file: ``index`` sits at the root, others in
    their own directory so they are served at ``/<name>/``.
    """
    if page_name == "index":
        return output_dir / "index.html"
    return output_dir / page_name / "index.html"


def _walk_assets(node: Traversable, prefix: PurePosixPath) -> Iterator[tuple[PurePosixPath, Traversable]]:
    for child in sorted(node.iterdir(), key=lambda item: item.name):
        relative = prefix / child.name
        if child.is_dir():
            yield from _walk_assets(child, relative)
        elif child.is_file():
            yield relative, child


def iter_static_assets(root: Optional[Traversable] = None) -> Iterator[tuple[PurePosixPath, Traversable]]:
    """
    Yield ``(relative_path, resource)`` for every static file under ``root``
    (the bundled assets directory by default).

    Raises:
        AssetError: If the bundled assets directory is missing.
    """
    if root is None:
        root = resources.files(ASSETS_PACKAGE).joinpath(ASSETS_DIRNAME)
    if not root.is_dir():
        raise AssetError(f"Assets directory not found: {root}")
    yield from _walk_assets(root, PurePosixPath())


def copy_static_assets(output_dir: Path, root: Optional[Traversable] = None) -> List[Path]:
    """
    Copy bundled stylesheets and fonts into ``output_dir``, preserving layout.

    Fonts and images are copied byte-for-byte, everything else as UTF-8 text.
    """
    copied: List[Path] = []
    for relative, resource in iter_static_assets(root):
        target = output_dir.joinpath(*relative.parts)
        if relative.suffix.lower() in BINARY_SUFFIXES:
            write_bytes_file(target, resource.read_bytes())
        else:
            write_text_file(target, resource.read_text(encoding="utf-8"))
        copied.append(target)
    logger.info("Copied %d static asset(s)", len(copied))
    return copied


def copy_photo(config: Config, output_dir: Path, base_dir: Path) -> Optional[Path]:
    """
    Copy ``about.photo`` into the output tree under the same relative path.

    Returns:
        The destination path, or None if no photo is configured or it does not exist.
    """
    photo = config.about.photo
    if not photo:
        return None

    relative = Path(photo)
    source = (base_dir / relative).resolve()
    if relative.is_absolute() or not is_relative_to(source, base_dir.resolve()):
        logger.warning("Photo path %s is outside the project directory; skipping", photo)
        return None
    if not source.is_file():
        logger.debug("Photo %s not found; skipping", source)
        return None

    target = output_dir / relative
    ensure_directory(target.parent)
    shutil.copyfile(source, target)
    logger.info("Copied photo to %s", target)
    return target


def build_site(
    config: Config,
    output_dir: Path | str,
    *,
    base_dir: Path | str | None = None,
    store: Optional[TemplateStore] = None,
) -> BuildReport:
    """
    Regenerate the whole site into ``output_dir``.

    Steps run in a fixed order: remove the previous output, render and write
    each page, copy static assets, copy the photo. Nothing is rolled back if a
    later step fails; the next run rebuilds everything.

    Args:
        config: Validated site configuration.
        output_dir: Destination directory; replaced wholesale.
        base_dir: Directory relative paths in the config resolve against
            (defaults to the current working directory).
        store: Template store override, mainly for tests.

    Returns:
        A BuildReport detailing what was written.

    Raises:
        BuildError: If ``output_dir`` would contain ``base_dir``, or writing the output fails.
        TemplateLookupError, AssetError, RenderError: On fatal render/asset failures.
    """
    root = Path(output_dir).expanduser().resolve()
    base = Path(base_dir).expanduser().resolve() if base_dir else Path.cwd().resolve()
    if is_relative_to(base, root):
        raise BuildError(f"Refusing to replace {root}: it contains the project directory {base}")

    store = store or TemplateStore()
    report = BuildReport(root=root)

    try:
        with build_lock(root):
            report.previous_removed = remove_tree(root)

            for page_name in PAGE_NAMES:
                logger.info("Rendering page '%s'", page_name)
                html = render_page(page_name, config, store)
                report.pages_written.append(write_text_file(page_destination(root, page_name), html))

            report.assets_copied = copy_static_assets(root)
            report.photo_copied = copy_photo(config, root, base)
    except OSError as exc:
        raise BuildError(f"Unable to write site output: {exc}") from exc

    return report
