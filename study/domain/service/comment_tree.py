"""Comment thread reconstruction.

The store keeps comments flat, each with an optional parent reference. This
module rebuilds the reply forest for one snapshot. It is a pure function of
its input: nothing is cached and nothing is logged.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from study.domain.model.comment import Comment
from study.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in a comment thread.

    Wraps a comment and its direct replies in the order they were posted.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


def _resolve_parents(
    comments: Sequence[Comment], index: dict[CommentId, int]
) -> dict[CommentId, CommentId | None]:
    """Map each comment to the parent it will hang under.

    Dangling parents resolve to None. Parent chains that loop back on
    themselves are cut at the member of the loop that comes first in the
    input, which then becomes a root.
    """
    parents: dict[CommentId, CommentId | None] = {}
    for comment in comments:
        if comment.id in parents:
            continue
        parent_id = comment.parent_id
        parents[comment.id] = parent_id if parent_id in index else None

    anchored: set[CommentId] = set()
    for comment in comments:
        chain: list[CommentId] = []
        on_chain: set[CommentId] = set()
        current: CommentId | None = comment.id
        while current is not None and current not in anchored:
            if current in on_chain:
                loop = chain[chain.index(current) :]
                head = min(loop, key=index.__getitem__)
                parents[head] = None
                break
            chain.append(current)
            on_chain.add(current)
            current = parents[current]
        anchored.update(chain)

    return parents


def build_comment_forest(comments: Sequence[Comment]) -> list[CommentNode]:
    """Rebuild the reply forest from a flat comment snapshot.

    Comments are expected in creation order; that order is kept among roots
    and among the children of every node. A comment whose parent is missing
    from the snapshot is returned as a root instead of being dropped. Only the
    first occurrence of a repeated id is used.

    Args:
        comments: Flat comments of one topic, oldest first

    Returns:
        Root nodes, each carrying its replies recursively
    """
    index: dict[CommentId, int] = {}
    nodes: dict[CommentId, CommentNode] = {}
    unique: list[Comment] = []
    for comment in comments:
        if comment.id in nodes:
            continue
        index[comment.id] = len(unique)
        nodes[comment.id] = CommentNode(comment=comment)
        unique.append(comment)

    parents = _resolve_parents(unique, index)

    roots: list[CommentNode] = []
    for comment in unique:
        node = nodes[comment.id]
        parent_id = parents[comment.id]
        if parent_id is None:
            roots.append(node)
        else:
            nodes[parent_id].children.append(node)

    return roots


def walk_forest(forest: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Yield every node with its depth, depth-first in display order.

    Iterative, so arbitrarily deep reply chains don't hit the recursion limit.
    """
    stack: list[tuple[CommentNode, int]] = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(forest: Sequence[CommentNode]) -> int:
    """Total number of comments in a forest."""
    return sum(1 for _ in walk_forest(forest))
