"""Public API functions for review-summary.

This module provides the user-facing functions: render, toggle_section and
lint_labels.  Each render call creates a fresh ReviewRenderer to guarantee
zero global state mutation between calls.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from review_summary.config import RenderOptions
from review_summary.renderer import ReviewRenderer
from review_summary.result import SectionTree
from review_summary.tree.nodes import LabelDiagnostic

__all__ = ["lint_labels", "render", "toggle_section"]


def render(
    data: Any,
    labels: Any = None,
    options: RenderOptions | None = None,
) -> SectionTree:
    """Render a review summary from a data document and a label document.

    Only entries named in the label document are projected; data without a
    label, and labels without data, produce nothing.

    Args:
        data:    Data document (object, JSON text, or a host payload carrying
                 it under ``formData`` / ``reviewData``).
        labels:  Label document (object, JSON text, or a payload carrying it
                 under ``labelData`` / ``labels`` / ``fieldLabels``).  When
                 None, labels are looked up on the data payload.
        options: Render options.  Defaults to ``RenderOptions()`` when None.

    Returns:
        A ``SectionTree``.  Equal inputs always give equal trees.

    Raises:
        MalformedInputError: Top-level JSON text could not be parsed.
        NoDataError: The data document is absent or empty.
    """
    return ReviewRenderer(options=options).render(data, labels)


def toggle_section(tree: SectionTree, section_id: str) -> SectionTree:
    """Return a copy of ``tree`` with one section's expanded flag flipped.

    Args:
        tree:       A rendered tree.
        section_id: ``Section.id`` to toggle.  Unknown ids leave the tree
                    unchanged.

    Returns:
        A new ``SectionTree``; ``tree`` itself is never modified.
    """
    sections = tuple(
        replace(section, expanded=not section.expanded)
        if section.id == section_id
        else section
        for section in tree.sections
    )
    return replace(tree, sections=sections)


def lint_labels(labels: Any) -> list[LabelDiagnostic]:
    """Return diagnostics about entries of a label document that will be ignored.

    Covers unusable label values, unknown field types and array labels whose
    later item schemas differ from the first one.

    Raises:
        MalformedInputError: The label document could not be parsed.
    """
    return ReviewRenderer().lint(labels)
