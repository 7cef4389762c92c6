"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import review_summary

    assert review_summary.__version__ is not None
    assert review_summary.__version__ == "0.1.0"
