"""Tree subpackage for label-document primitives.

Re-exports the public API for the tree module:
- FieldLabel, GroupLabel, ArrayItemLabel: the label-node union
- FieldType: StrEnum of display types
- DataKind: StrEnum of data-value kinds (SCALAR, CONTAINER, LIST)
- LabelDiagnostic: lint record produced while building label trees
- LabelTreeBuilder: converts a parsed label document into a label tree
- TitleFormatter: derives section/block titles from keys
- join_pointer: appends an escaped JSON Pointer token
"""

from review_summary.tree.builder import LabelTreeBuilder
from review_summary.tree.nodes import (
    ArrayItemLabel,
    DataKind,
    FieldLabel,
    FieldType,
    GroupLabel,
    LabelDiagnostic,
    LabelNode,
    classify_data,
    join_pointer,
)
from review_summary.tree.titles import TitleFormatter

__all__ = [
    "ArrayItemLabel",
    "DataKind",
    "FieldLabel",
    "FieldType",
    "GroupLabel",
    "LabelDiagnostic",
    "LabelNode",
    "LabelTreeBuilder",
    "TitleFormatter",
    "classify_data",
    "join_pointer",
]
