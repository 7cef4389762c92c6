"""Input normalization: raw data/label inputs -> parsed documents.

Both documents may arrive as Python objects or as JSON text (long-text fields
store them serialized).  Either may also be wrapped by a host payload that
exposes the real document under a conventional key:

- data:   ``formData``, then ``reviewData``; otherwise the wrapper itself
- labels: ``labelData``, then ``labels``, then ``fieldLabels``

Parse failures at this level abort the render with ``MalformedInputError``.
"""

from __future__ import annotations

import json
from typing import Any

from review_summary.errors import MalformedInputError, NoDataError
from review_summary.tree.builder import LabelTreeBuilder
from review_summary.tree.nodes import GroupLabel

__all__ = [
    "DATA_WRAPPER_KEYS",
    "LABEL_WRAPPER_KEYS",
    "load_labels",
    "normalize",
    "parse_documents",
    "parse_json_text",
]

DATA_WRAPPER_KEYS = ("formData", "reviewData")
LABEL_WRAPPER_KEYS = ("labelData", "labels", "fieldLabels")


def parse_json_text(text: str, path: str = "") -> Any:
    """Parse JSON text, raising ``MalformedInputError`` tagged with ``path``."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"invalid JSON: {exc.msg}", path) from exc


def _probe(wrapper: Any, keys: tuple[str, ...]) -> tuple[str, Any] | None:
    """Return the first ``(key, value)`` in ``wrapper`` with a truthy value."""
    if not isinstance(wrapper, dict):
        return None
    for key in keys:
        value = wrapper.get(key)
        if value:
            return key, value
    return None


def _load(value: Any, path: str) -> Any:
    return parse_json_text(value, path) if isinstance(value, str) else value


def parse_documents(
    raw_data: Any, raw_labels: Any = None
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Unwrap and parse both inputs into plain mappings.

    Args:
        raw_data:   Data document, JSON text, or a wrapper payload.
        raw_labels: Label document, JSON text, a wrapper payload, or None to
                    look for labels on the data wrapper.

    Returns:
        ``(data, labels)`` as parsed mappings.

    Raises:
        MalformedInputError: If JSON text fails to parse or a document is not
            a JSON object.
        NoDataError: If the data document is absent or empty.
    """
    if raw_data is None or (isinstance(raw_data, str) and not raw_data.strip()):
        raise NoDataError()
    wrapper = _load(raw_data, "")

    found = _probe(wrapper, DATA_WRAPPER_KEYS)
    if found is None:
        data = wrapper
    else:
        key, value = found
        data = _load(value, f"/{key}")

    if data is None or data == {}:
        raise NoDataError()
    if not isinstance(data, dict):
        msg = f"data document must be a JSON object, got {type(data).__name__}"
        raise MalformedInputError(msg)

    if raw_labels is None:
        found = _probe(wrapper, LABEL_WRAPPER_KEYS)
        labels = _load(found[1], f"/{found[0]}") if found is not None else {}
        return data, _require_labels(labels)

    return data, load_labels(raw_labels)


def load_labels(raw_labels: Any) -> dict[str, Any]:
    """Parse and unwrap a label document on its own.

    Raises:
        MalformedInputError: If JSON text fails to parse or the document is
            not a JSON object.
    """
    container = _load(raw_labels, "")
    found = _probe(container, LABEL_WRAPPER_KEYS)
    labels = _load(found[1], f"/{found[0]}") if found is not None else container
    return _require_labels(labels)


def _require_labels(labels: Any) -> dict[str, Any]:
    if labels is None:
        return {}
    if not isinstance(labels, dict):
        msg = f"label document must be a JSON object, got {type(labels).__name__}"
        raise MalformedInputError(msg)
    return labels


def normalize(
    raw_data: Any,
    raw_labels: Any = None,
    builder: LabelTreeBuilder | None = None,
) -> tuple[dict[str, Any], GroupLabel]:
    """Return the data mapping and the ordered label tree.

    Args:
        raw_data:   See ``parse_documents``.
        raw_labels: See ``parse_documents``.
        builder:    Label builder to use; pass one to collect diagnostics.

    Returns:
        ``(data, label_root)``.
    """
    data, labels = parse_documents(raw_data, raw_labels)
    builder = builder if builder is not None else LabelTreeBuilder()
    return data, builder.build(labels)
