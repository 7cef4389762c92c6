"""Review summary - label-driven presentation trees for form data."""

from __future__ import annotations

import logging

from review_summary.api import lint_labels, render, toggle_section
from review_summary.config import RenderOptions
from review_summary.errors import MalformedInputError, NoDataError, ReviewSummaryError
from review_summary.formatting import PLACEHOLDER, format_value
from review_summary.inference import infer_type
from review_summary.normalizer import normalize
from review_summary.renderer import ReviewRenderer
from review_summary.result import ArrayRow, Block, Column, Field, Section, SectionTree
from review_summary.tree.nodes import FieldType, LabelDiagnostic

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "PLACEHOLDER",
    "ArrayRow",
    "Block",
    "Column",
    "Field",
    "FieldType",
    "LabelDiagnostic",
    "MalformedInputError",
    "NoDataError",
    "RenderOptions",
    "ReviewRenderer",
    "ReviewSummaryError",
    "Section",
    "SectionTree",
    "format_value",
    "infer_type",
    "lint_labels",
    "normalize",
    "render",
    "toggle_section",
]
