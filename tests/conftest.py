import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'mustache_filters'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from mustache_filters.core.rendering import RenderContext, Tag


@pytest.fixture
def tag() -> Tag:
    """An HTML-escaping variable tag."""
    return Tag(expression="f(x)", line=1)


@pytest.fixture
def raw_tag() -> Tag:
    """A triple-mustache tag: output is not escaped."""
    return Tag(expression="f(x)", escapes_html=False, delimiters=("{{{", "}}}"))


@pytest.fixture
def context() -> RenderContext:
    return RenderContext({"name": "abc"})
