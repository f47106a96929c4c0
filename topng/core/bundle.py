"""Fallback import hook for modules shipped inside the program bundle.

Single-file builds unpack their payload into a private directory instead of
site-packages. The finder below is appended to ``sys.meta_path`` so it only runs
after the regular finders have given up, and looks the module up in the bundle
roots, trying a locale-specific subdirectory first.
"""

import importlib.abc
import importlib.machinery
import locale
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

BUNDLE_DIRNAME = "_bundled"


def bundle_roots() -> list[Path]:
    """Existing directories that may hold bundled modules."""
    candidates = [Path(__file__).resolve().parent.parent / BUNDLE_DIRNAME]

    # Set by PyInstaller one-file executables
    frozen_dir = getattr(sys, "_MEIPASS", None)
    if getattr(sys, "frozen", False) and frozen_dir:
        candidates.insert(0, Path(frozen_dir) / BUNDLE_DIRNAME)

    return [root for root in candidates if root.is_dir()]


def _locale_dirs(language_code: str | None) -> list[str]:
    # "de_DE" -> ["de_DE", "de"]
    if not language_code or language_code in ("C", "POSIX"):
        return []
    names = [language_code]
    language = language_code.split("_", 1)[0]
    if language != language_code:
        names.append(language)
    return names


def _current_language() -> str | None:
    try:
        return locale.getlocale()[0]
    except ValueError:
        return None


class BundledResourceFinder(importlib.abc.MetaPathFinder):
    def __init__(self, roots: list[Path], language_code: str | None = None):
        self.roots = [Path(root) for root in roots]
        self.language_code = language_code if language_code is not None else _current_language()

    def search_paths(self) -> list[str]:
        paths: list[str] = []
        for root in self.roots:
            for name in _locale_dirs(self.language_code):
                localized = root / name
                if localized.is_dir():
                    paths.append(str(localized))
            paths.append(str(root))
        return paths

    def find_spec(self, fullname, path=None, target=None):
        # Submodules resolve through their parent's __path__
        if path is not None:
            return None

        spec = importlib.machinery.PathFinder.find_spec(fullname, self.search_paths())
        if spec is None:
            return None

        logger.debug(f"Loading bundled module {fullname} from {spec.origin}")
        return spec

    def invalidate_caches(self) -> None:
        importlib.machinery.PathFinder.invalidate_caches()


def install_resource_loader(roots: list[Path] | None = None) -> BundledResourceFinder:
    """Append the bundle finder to sys.meta_path once and return it."""
    for finder in sys.meta_path:
        if isinstance(finder, BundledResourceFinder):
            return finder

    finder = BundledResourceFinder(bundle_roots() if roots is None else roots)
    sys.meta_path.append(finder)
    return finder


def uninstall_resource_loader() -> None:
    sys.meta_path[:] = [
        finder for finder in sys.meta_path if not isinstance(finder, BundledResourceFinder)
    ]
