"""Pytest fixtures for docs_standards tests."""

from __future__ import annotations

import itertools
import textwrap
from pathlib import Path
from typing import Callable

import pytest

_module_ids = itertools.count()


@pytest.fixture
def make_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str], str]:
    """Write source to a uniquely named importable module, return its name."""
    monkeypatch.syspath_prepend(str(tmp_path))

    def _make(source: str) -> str:
        name = f"ds_sample_{next(_module_ids)}"
        (tmp_path / f"{name}.py").write_text(textwrap.dedent(source))
        return name

    return _make


@pytest.fixture
def sample_module(make_module: Callable[[str], str]) -> str:
    """Module with one compliant and one broken function, plus a class."""
    return make_module(
        '''
        """Sample module for testing."""

        from __future__ import annotations

        from typing import Callable


        class Widget:
            """A widget."""


        def compliant(items: list, widget: Widget, limit: int = 10, *args) -> int:
            """Count widget items.

            @param array  $items  Items to count.
            @param Widget $widget The widget.
            @param int    $limit  Optional. Maximum count. Default 10.
            @param mixed  $args   Optional. Extra arguments.
            """
            return 0


        def broken(handler: Callable, flag: bool) -> None:
            """Call the handler.

            @param callback $handler Handler to call.
            @param bool     $flag    Optional. Whether to call.
            """


        def undocumented(x):
            return x


        class Store:
            """Key value store."""

            def __init__(self, name: str):
                """Create a store.

                @param string $name Store name.
                """
                self.name = name

            def get(self, key: str, default=None):
                """Fetch a key.

                @param string $key     Key to fetch.
                @param mixed  $default Optional. Fallback value. Default None.
                """

            @classmethod
            def create(cls, names=()):
                """Build a store.

                @param array $names Optional. Store names.
                """

            @staticmethod
            def helper(value):
                """Help.

                @param mixed $value The value.
                """

            def _private(self):
                """Private helper."""
        '''
    )
