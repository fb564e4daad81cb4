"""District hierarchy and its label-collecting traversals.

A district tree is a rooted, ordered tree of one-character labels. Both
traversals are iterative (explicit stack / queue) so their depth is
bounded by the size of the tree rather than the interpreter's call stack.
"""

from __future__ import annotations

import string
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..domain.errors import DistrictTreeError

LabelPredicate = Callable[[str], bool]


def is_uppercase_label(symbol: str) -> bool:
    """Return True for a single ASCII uppercase letter."""
    return len(symbol) == 1 and symbol in string.ascii_uppercase


@dataclass
class DistrictNode:
    symbol: str
    subdistricts: List[DistrictNode] = field(default_factory=list)


class DistrictTree:
    """Rooted district hierarchy. ``root`` may be None for an empty tree."""

    def __init__(self, root: Optional[DistrictNode] = None) -> None:
        self.root = root

    @classmethod
    def from_edges(
        cls, pairs: Iterable[Tuple[str, Optional[str]]]
    ) -> DistrictTree:
        """Build a tree from ``(symbol, parent_symbol)`` pairs.

        Pairs are applied in order; a parent must appear before any of its
        children, and exactly one pair has no parent (the root). Every
        symbol is a single character. Children keep the order in which
        they were declared.

        Raises:
            DistrictTreeError: If the pairs do not form a single rooted tree.
        """
        nodes: Dict[str, DistrictNode] = {}
        root: Optional[DistrictNode] = None

        for symbol, parent in pairs:
            if len(symbol) != 1:
                raise DistrictTreeError(
                    f"District symbol must be one character: {symbol!r}",
                    symbol=symbol,
                )
            if symbol in nodes:
                raise DistrictTreeError(
                    f"Duplicate district: {symbol}", symbol=symbol
                )
            node = DistrictNode(symbol)
            if parent is None:
                if root is not None:
                    raise DistrictTreeError(
                        f"Second root district: {symbol}", symbol=symbol
                    )
                root = node
            else:
                parent_node = nodes.get(parent)
                if parent_node is None:
                    raise DistrictTreeError(
                        f"Unknown parent district {parent!r} for {symbol}",
                        symbol=symbol,
                    )
                parent_node.subdistricts.append(node)
            nodes[symbol] = node

        return cls(root)

    def find_labels_dfs(
        self, predicate: LabelPredicate = is_uppercase_label
    ) -> List[str]:
        """Pre-order depth-first labels that satisfy ``predicate``."""
        result: List[str] = []
        if self.root is None:
            return result

        stack: List[DistrictNode] = [self.root]
        while stack:
            current = stack.pop()
            if predicate(current.symbol):
                result.append(current.symbol)
            # Reversed so the first child is popped next.
            stack.extend(reversed(current.subdistricts))

        return result

    def find_labels_bfs(
        self, predicate: LabelPredicate = is_uppercase_label
    ) -> List[str]:
        """Level-order labels that satisfy ``predicate``."""
        result: List[str] = []
        if self.root is None:
            return result

        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            if predicate(current.symbol):
                result.append(current.symbol)
            queue.extend(current.subdistricts)

        return result

    def find_uppercase_dfs(self) -> List[str]:
        return self.find_labels_dfs(is_uppercase_label)

    def find_uppercase_bfs(self) -> List[str]:
        return self.find_labels_bfs(is_uppercase_label)

    def __len__(self) -> int:
        return len(self.find_labels_bfs(lambda _symbol: True))
