"""Dotted key path resolution over a translation tree.

A key path such as "home.header.title" addresses the submap
"home" -> "header" and the leaf "title" inside it. Resolution never raises:
a missing or non-subtree segment degrades to an empty node.
"""

from typing import List, Optional

from tree_i18n.i18n.models import Leaf, Node

KEY_SEPARATOR = "."


def split_key(key_path: str) -> List[str]:
    return key_path.split(KEY_SEPARATOR)


def leaf_segment(key_path: str) -> str:
    """Return the last segment of a key path (the leaf key)."""
    return split_key(key_path)[-1]


def replace_leaf_segment(key_path: str, new_leaf: str) -> str:
    """Return key_path with its last segment replaced by new_leaf."""
    segments = split_key(key_path)
    segments[-1] = new_leaf
    return KEY_SEPARATOR.join(segments)


def resolve_submap(tree: Node, key_path: str) -> Node:
    """Walk all but the last segment of key_path starting from tree.

    Args:
        tree: Root node to resolve against.
        key_path: Dotted key path.

    Returns:
        The node holding the leaf addressed by key_path, or an empty node
        when any intermediate segment is missing or is a leaf.
    """
    current = tree
    for segment in split_key(key_path)[:-1]:
        child = current.get(segment)
        current = child if isinstance(child, Node) else Node.empty()
    return current


def lookup(tree: Node, key_path: str) -> Optional[str]:
    """Return the string stored at key_path, or None if there is none."""
    value = resolve_submap(tree, key_path).get(leaf_segment(key_path))
    if isinstance(value, Leaf):
        return value.value
    return None
