"""pytest plugin for review-summary.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from review_summary import RenderOptions, render


@pytest.fixture(scope="session")
def assert_field_display() -> Any:
    """Fixture that returns a callable display-value asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to render() which creates a fresh ReviewRenderer per call).

    Usage in tests::

        def test_phone(assert_field_display):
            assert_field_display(
                {"Step1": {"phone": "8745638765"}},
                {"Step1": {"phone": "Phone"}},
                "/Step1/phone",
                "(874) 563-8765",
            )

    Returns:
        A callable ``_assert(data, labels, path, expected, options=None) -> None``
        that raises ``AssertionError`` when the field at ``path`` is missing
        or renders differently.
    """

    def _assert(
        data: Any,
        labels: Any,
        path: str,
        expected: str,
        options: RenderOptions | None = None,
    ) -> None:
        """Assert that the field rendered from ``path`` displays ``expected``.

        Args:
            data:     Data document passed to render().
            labels:   Label document passed to render().
            path:     JSON Pointer of the value in the data document.
            expected: Expected display string.
            options:  Optional RenderOptions.

        Raises:
            AssertionError: When no field was rendered for ``path`` (the message
                lists the rendered paths) or its display value differs.
        """
        tree = render(data, labels, options=options)
        field = tree.find_field(path)
        if field is None:
            rendered = [f.path for f in tree.iter_fields()]
            raise AssertionError(
                f"No field rendered for {path!r}\n"
                f"  rendered paths: {rendered}"
            )
        if field.display_value != expected:
            raise AssertionError(
                f"Field {path!r} displays {field.display_value!r}, "
                f"expected {expected!r}\n"
                f"  value: {field.value!r}\n"
                f"  type:  {field.type}"
            )

    return _assert
