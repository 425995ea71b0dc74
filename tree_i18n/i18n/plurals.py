"""Plural variant selection by numeric threshold.

A plural family "count" is stored as sibling keys "count-0", "count-1",
"count-5", ... where the suffix is the smallest value the variant applies
to. Selection is a staircase: the variant with the largest threshold not
exceeding the value wins. "count-" (empty suffix) is used when no threshold
qualifies, e.g. for negative values.
"""

import re
from typing import Optional

from tree_i18n.i18n.lookup import leaf_segment, replace_leaf_segment
from tree_i18n.i18n.models import Node

PLURAL_SEPARATOR = "-"

_PARAMETER_PATTERN = re.compile(r"\{([^{}]+)\}")


def _threshold(variant_key: str, base_name: str) -> Optional[int]:
    """Return the integer suffix of base_name-<digits>, else None."""
    prefix = base_name + PLURAL_SEPARATOR
    if not variant_key.startswith(prefix):
        return None
    suffix = variant_key[len(prefix) :]
    if not (suffix.isascii() and suffix.isdigit()):
        return None
    return int(suffix)


def find_plural_key(submap: Node, key_path: str, value: int) -> str:
    """Rewrite key_path so its last segment names the matching variant.

    Args:
        submap: Node holding the plural family (see resolve_submap).
        key_path: Dotted path ending in the family base name.
        value: Number to select a variant for.

    Returns:
        key_path with its last segment replaced by the selected variant key.
        Among variants with equal thresholds the last one in mapping order
        wins.
    """
    base_name = leaf_segment(key_path)
    best_key = None
    best_threshold = None
    for variant_key in submap.keys():
        threshold = _threshold(variant_key, base_name)
        if threshold is None or threshold > value:
            continue
        if best_threshold is None or threshold >= best_threshold:
            best_key, best_threshold = variant_key, threshold

    if best_key is None:
        best_key = base_name + PLURAL_SEPARATOR
    return replace_leaf_segment(key_path, best_key)


def find_parameter_name(template: Optional[str]) -> str:
    """Return the name of the first {name} placeholder in template, or ""."""
    if template is None:
        return ""
    match = _PARAMETER_PATTERN.search(template)
    return match.group(1) if match else ""
