"""
Folder tree view

Turns the flat CollectionStore into nested nodes for display. Expand/collapse
and selection live in TreeViewState, which the caller owns and passes in;
nothing here writes to the store.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..types.collections import Collection
from .store import CollectionStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


class TreeViewState:
    """
    Ephemeral view state of the folder tree.

    Every folder starts collapsed. A selection of None stands for the
    "All Documents" pseudo-root.
    """

    def __init__(self):
        self.expanded: Set[str] = set()
        self.selected_collection_id: Optional[str] = None

    def is_expanded(self, collection_id: str) -> bool:
        return collection_id in self.expanded

    def toggle(self, collection_id: str) -> bool:
        """Flip a folder between collapsed and expanded; returns the new state"""
        if collection_id in self.expanded:
            self.expanded.discard(collection_id)
            return False
        self.expanded.add(collection_id)
        return True

    def expand(self, collection_id: str) -> None:
        self.expanded.add(collection_id)

    def collapse(self, collection_id: str) -> None:
        self.expanded.discard(collection_id)

    def collapse_all(self) -> None:
        self.expanded.clear()

    def select(self, collection_id: Optional[str]) -> None:
        self.selected_collection_id = collection_id

    def is_selected(self, collection_id: Optional[str]) -> bool:
        return self.selected_collection_id == collection_id

    def forget(self, collection_ids: Iterable[str]) -> None:
        """Drop state for deleted folders; a deleted selection falls back to All Documents"""
        removed = set(collection_ids)
        self.expanded -= removed
        if self.selected_collection_id in removed:
            self.selected_collection_id = None


@dataclass
class FolderNode:
    """A collection with its ordered children, ready for rendering"""

    collection: Collection
    depth: int
    expanded: bool = False
    selected: bool = False
    children: List["FolderNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.collection.id

    @property
    def name(self) -> str:
        return self.collection.name

    @property
    def has_children(self) -> bool:
        return bool(self.children)


def build_forest(
    store: CollectionStore,
    view_state: Optional[TreeViewState] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[FolderNode]:
    """
    Build the nested folder forest from the store's flat records.

    Every level is ordered the way children_of orders it, roots first.
    The walk terminates on corrupt data: a collection already placed in the
    forest is not visited again, and nothing deeper than max_depth is built.
    Collections caught in a pure cycle have no path from a root and are left out.
    The walk keeps its own stack, so deep chains do not hit the recursion limit.
    """
    view_state = view_state or TreeViewState()
    children = _group_children(store)
    visited: Set[str] = set()
    forest: List[FolderNode] = []

    # (collection, depth, parent node or None for a root)
    stack: List[Tuple[Collection, int, Optional[FolderNode]]] = [
        (root, 0, None) for root in reversed(children.get(None, []))
    ]
    while stack:
        collection, depth, parent = stack.pop()
        if collection.id in visited:
            logger.warning("Skipping collection %s: already in tree (cycle in parent links)", collection.id)
            continue
        visited.add(collection.id)

        node = FolderNode(
            collection=collection,
            depth=depth,
            expanded=view_state.is_expanded(collection.id),
            selected=view_state.is_selected(collection.id),
        )
        (forest if parent is None else parent.children).append(node)

        below = children.get(collection.id, [])
        if depth + 1 >= max_depth:
            if below:
                logger.warning("Folder tree truncated below %s at depth %d", collection.id, depth)
            continue
        stack.extend((child, depth + 1, node) for child in reversed(below))

    return forest


def _group_children(store: CollectionStore) -> Dict[Optional[str], List[Collection]]:
    """children_of for every parent in one pass over the store"""
    grouped: Dict[Optional[str], List[Collection]] = {}
    for collection in store:
        grouped.setdefault(collection.parent_id, []).append(collection)
    for siblings in grouped.values():
        siblings.sort(key=lambda c: c.name.casefold())
    return grouped


def iter_visible(forest: List[FolderNode]) -> Iterator[FolderNode]:
    """Yield nodes in display order, descending only into expanded folders"""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        if node.expanded:
            stack.extend(reversed(node.children))


def iter_all(forest: List[FolderNode]) -> Iterator[FolderNode]:
    """Yield every node depth-first, regardless of expansion"""
    stack = list(reversed(forest))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
