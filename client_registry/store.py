"""
Ordered in-memory store of clients keyed by `client_id`.

The store is a plain binary search tree with no rebalancing: inserting ids
in sorted order degenerates it into a linked list and every operation
becomes O(n). `height()` makes that visible. All walks are iterative, so a
degenerate tree deeper than the recursion limit still works.

Not safe for concurrent mutation; one session owns one store.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .schemas import Client, DuplicateClientError, RegistryError
from .validation import check_client

log = logging.getLogger(__name__)


@dataclass
class _Node:
    # key is captured at insert time; reassigning client.client_id later
    # cannot move the node or break the ordering
    key: int
    client: Client
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class ClientStore:
    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    # ---------------- Mutations ---------------- #

    def add(self, client: Client) -> None:
        """Insert `client` or raise; the store is untouched on error.

        Raises:
            ClientValidationError: base data breaks a validation rule.
            DuplicateClientError: a client with the same id is already stored.
        """
        check_client(client)

        node = _Node(client.client_id, client)
        if self._root is None:
            self._root = node
            self._size += 1
            return

        cur = self._root
        while True:
            if client.client_id < cur.key:
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            elif client.client_id > cur.key:
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
            else:
                raise DuplicateClientError(client.client_id)

        self._size += 1

    def insert(self, client: Client) -> bool:
        """Insert `client`, returning False (and logging why) if rejected."""
        try:
            self.add(client)
        except RegistryError as e:
            log.warning("Insertion of client %s skipped: %s", client.client_id, e)
            return False
        log.debug("Inserted client %s", client.client_id)
        return True

    def delete(self, client_id: int) -> bool:
        """Remove the client with `client_id`; False if it is not stored."""
        parent, node = None, self._root
        while node is not None and node.key != client_id:
            parent = node
            node = node.left if client_id < node.key else node.right

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # take over the in-order successor, then unlink it from the right subtree
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key, node.client = succ.key, succ.client
            self._relink(succ_parent, succ, succ.right)
        else:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)

        self._size -= 1
        log.debug("Removed client %s", client_id)
        return True

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def _relink(self, parent: Optional[_Node], node: _Node, child: Optional[_Node]) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    # ---------------- Queries ---------------- #

    def lookup(self, client_id: int) -> Optional[Client]:
        """The stored record itself, or None.

        The tree is ordered by the id the client had when it was inserted;
        assigning a new `client_id` to the returned record does not rekey it.
        """
        node = self._root
        while node is not None:
            if client_id == node.key:
                return node.client
            node = node.left if client_id < node.key else node.right
        return None

    def traverse_ordered(self) -> List[Client]:
        """All clients in ascending id order (left subtree, node, right subtree)."""
        return list(self)

    def root_id(self) -> Optional[int]:
        return self._root.key if self._root is not None else None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        best = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def __iter__(self) -> Iterator[Client]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.client
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, client_id: object) -> bool:
        return isinstance(client_id, numbers.Integral) and self.lookup(int(client_id)) is not None

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"ClientStore(size={self._size}, height={self.height()})"
