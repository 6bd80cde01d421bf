"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from codeshift.collection import MethodRegistry  # noqa: E402
from codeshift.entry import Core  # noqa: E402
from codeshift.parsing import DiffPrinter, TreeSitterParser  # noqa: E402
from codeshift.plugins import PluginRegistry  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    """Drop debug events unless a test configures logging itself."""
    structlog.reset_defaults()
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(30))


@pytest.fixture
def plugins() -> PluginRegistry:
    return PluginRegistry()


@pytest.fixture
def methods() -> MethodRegistry:
    return MethodRegistry()


@pytest.fixture
def js_parser() -> TreeSitterParser:
    return TreeSitterParser("javascript")


@pytest.fixture
def core(js_parser: TreeSitterParser, plugins: PluginRegistry, methods: MethodRegistry) -> Core:
    """Entry point with fresh registries, isolated from the production one."""
    return Core(js_parser, DiffPrinter(), plugins=plugins, methods=methods)
