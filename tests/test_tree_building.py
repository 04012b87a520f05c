import pytest

from katas.tree_building import Node, Record, TreeError, build

SUCCESS_CASES = [
    ("empty input", [], None),
    ("one node", [Record(0)], Node(0)),
    (
        "three nodes in order",
        [Record(0), Record(1, 0), Record(2, 0)],
        Node(0, [Node(1), Node(2)]),
    ),
    (
        "three nodes in reverse order",
        [Record(2, 0), Record(1, 0), Record(0)],
        Node(0, [Node(1), Node(2)]),
    ),
    (
        "more than two children",
        [Record(3, 0), Record(2, 0), Record(1, 0), Record(0)],
        Node(0, [Node(1), Node(2), Node(3)]),
    ),
    (
        "binary tree",
        [
            Record(5, 1),
            Record(3, 2),
            Record(2, 0),
            Record(4, 1),
            Record(1, 0),
            Record(0),
            Record(6, 2),
        ],
        Node(0, [Node(1, [Node(4), Node(5)]), Node(2, [Node(3), Node(6)])]),
    ),
    (
        "unbalanced tree",
        [
            Record(5, 2),
            Record(3, 2),
            Record(2, 0),
            Record(4, 1),
            Record(1, 0),
            Record(0),
            Record(6, 2),
        ],
        Node(0, [Node(1, [Node(4)]), Node(2, [Node(3), Node(5), Node(6)])]),
    ),
]

FAILURE_CASES = [
    ("root node has parent", [Record(0, 1), Record(1, 0)]),
    ("no root node", [Record(1, 0)]),
    ("duplicate node", [Record(0, 0), Record(1, 0), Record(1, 0)]),
    ("duplicate root", [Record(0, 0), Record(0, 0)]),
    ("non-continuous", [Record(2, 0), Record(4, 2), Record(1, 0), Record(0)]),
    (
        "cycle directly",
        [
            Record(5, 2),
            Record(3, 2),
            Record(2, 2),
            Record(4, 1),
            Record(1, 0),
            Record(0),
            Record(6, 3),
        ],
    ),
    (
        "cycle indirectly",
        [
            Record(5, 2),
            Record(3, 2),
            Record(2, 6),
            Record(4, 1),
            Record(1, 0),
            Record(0),
            Record(6, 3),
        ],
    ),
    ("higher id parent of lower id", [Record(0), Record(2, 0), Record(1, 2)]),
    ("negative parent", [Record(-2, -2), Record(-1, -2)]),
]


@pytest.mark.parametrize(
    "records,expected",
    [(records, expected) for _, records, expected in SUCCESS_CASES],
    ids=[name for name, _, _ in SUCCESS_CASES],
)
def test_build_success(records, expected):
    assert build(records) == expected


@pytest.mark.parametrize(
    "records",
    [records for _, records in FAILURE_CASES],
    ids=[name for name, _ in FAILURE_CASES],
)
def test_build_failure(records):
    with pytest.raises(TreeError):
        build(records)


def test_build_does_not_reorder_input():
    records = [Record(2, 0), Record(1, 0), Record(0)]
    build(records)
    assert records == [Record(2, 0), Record(1, 0), Record(0)]


def test_build_large_shallow_tree():
    records = [Record(i, 0) for i in range(999, -1, -1)]
    root = build(records)
    assert [child.id for child in root.children] == list(range(1, 1000))