"""Load filters from layered directories of Python modules.

Every ``*.py`` file (except ``__init__.py``) is imported, directory by
directory and by name within a directory. Module-level Filter objects are
registered under their attribute name; public functions defined in the
module itself are registered as value filters. Helpers imported from
elsewhere are ignored. Later layers override earlier ones.

    # filters/text.py
    from mustache_filters.core.filters import string_filter

    shout = string_filter(lambda text: text.upper() + "!")

    def reverse(value):
        return list(reversed(value))
"""
from __future__ import annotations

import importlib.util
import inspect
import logging
from pathlib import Path
from types import ModuleType
from typing import Any, Iterable, Iterator, Optional

from .base import Filter
from .registry import FilterRegistry, global_registry

logger = logging.getLogger(__name__)

MODULE_NAMESPACE = "mustache_filters.filters"


def _filter_modules(dirs: Iterable[Path]) -> Iterator[Path]:
    for directory in dirs:
        if not directory.is_dir():
            logger.debug("Skipping missing filter directory %s", directory)
            continue
        for path in sorted(directory.glob("*.py")):
            if path.name != "__init__.py" and path.is_file():
                yield path


def _import_filter_module(path: Path) -> Optional[ModuleType]:
    """Import ``path`` outside sys.modules; None when it fails to import."""
    spec = importlib.util.spec_from_file_location(f"{MODULE_NAMESPACE}.{path.stem}", path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import filter module %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        logger.warning("Failed to load filter module %s: %s", path, e)
        return None
    return module


def _module_filters(module: ModuleType) -> Iterator[tuple[str, Any]]:
    for name, member in vars(module).items():
        if name.startswith("_"):
            continue
        if isinstance(member, Filter):
            yield name, member
        elif inspect.isfunction(member) and member.__module__ == module.__name__:
            yield name, member


def load_filters(dirs: Iterable[Path], registry: Optional[FilterRegistry] = None) -> int:
    """Load and register filters from all layers.

    Args:
        dirs: Directories in layer order (later layers override earlier)
        registry: Registry to populate (defaults to global_registry)

    Returns:
        Number of filters registered
    """
    target = registry if registry is not None else global_registry
    total = 0
    for path in _filter_modules(Path(d) for d in dirs):
        module = _import_filter_module(path)
        if module is None:
            continue
        count = 0
        for name, member in sorted(_module_filters(module)):
            target.add(name, member)
            count += 1
        logger.debug("Loaded %d filter(s) from %s", count, path)
        total += count
    return total


__all__ = ["MODULE_NAMESPACE", "load_filters"]
