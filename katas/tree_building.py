"""Building a tree from flat parent/child records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


class TreeError(ValueError):
    """Raised when the records do not describe a valid tree."""


@dataclass(frozen=True)
class Record:
    """A flat record naming a node and its parent."""

    id: int
    parent: int = 0


@dataclass
class Node:
    """A node of the built tree."""

    id: int
    children: list[Node] = field(default_factory=list)


def build(records: Iterable[Record]) -> Node | None:
    """Return the root of the tree described by records, or None if empty."""
    ordered = sorted(records, key=lambda record: record.id)
    if not ordered:
        return None

    if ordered[-1].id > len(ordered) - 1:
        raise TreeError("non-continuous nodes")

    root, *rest = ordered
    if root.id != root.parent:
        raise TreeError(f"root node has a parent ID of {root.parent}")

    root_node = Node(root.id)
    nodes = [root_node]
    seen: set[int] = set()

    for record in rest:
        if record.id <= record.parent:
            raise TreeError(
                f"ID {record.id} must be greater than its parent ID {record.parent}"
            )
        if record.id in seen:
            raise TreeError(f"ID {record.id} is not unique")
        seen.add(record.id)

        if not 0 <= record.parent < len(nodes):
            raise TreeError(f"parent ID {record.parent} of {record.id} is unknown")
        node = Node(record.id)
        nodes.append(node)
        nodes[record.parent].children.append(node)

    return root_node