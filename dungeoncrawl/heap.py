"""A Fibonacci heap ordered by a key function, with decrease-key support."""

from __future__ import annotations

from typing import Any, Callable, Optional


class HeapNode:
    """A node of a :class:`FibonacciHeap`, returned by ``insert``."""

    __slots__ = ("item", "next", "prev", "parent", "child", "degree", "mark")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.next: HeapNode = self
        self.prev: HeapNode = self
        self.parent: Optional[HeapNode] = None
        self.child: Optional[HeapNode] = None
        self.degree = 0
        self.mark = False

    def __repr__(self) -> str:
        return f"HeapNode({self.item!r})"


def _insert_before(node: HeapNode, anchor: HeapNode) -> None:
    node.next = anchor
    node.prev = anchor.prev
    node.prev.next = node
    anchor.prev = node


def _unlink(node: HeapNode) -> None:
    node.next.prev = node.prev
    node.prev.next = node.next


def _splice(first: HeapNode, second: HeapNode) -> None:
    first.next.prev = second.prev
    second.prev.next = first.next
    first.next = second
    second.prev = first


class FibonacciHeap:
    """A min-heap whose order is given by ``key(item)``."""

    def __init__(self, key: Callable[[Any], Any]) -> None:
        self._key = key
        self._min: Optional[HeapNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._min is not None

    def _less(self, a: HeapNode, b: HeapNode) -> bool:
        return self._key(a.item) < self._key(b.item)

    def insert(self, item: Any) -> HeapNode:
        """Add an item; the returned node can later be passed to decrease_key."""
        node = HeapNode(item)
        if self._min is not None:
            _insert_before(node, self._min)
        if self._min is None or self._less(node, self._min):
            self._min = node
        self._size += 1
        return node

    def peek_min(self) -> Any:
        """Return the smallest item without removing it."""
        if self._min is None:
            raise IndexError("peek from an empty heap")
        return self._min.item

    def _link(self, node: HeapNode, root: HeapNode) -> None:
        if root.child is not None:
            _insert_before(node, root.child)
        else:
            root.child = node
            node.next = node.prev = node
        node.parent = root
        root.degree += 1
        node.mark = False

    def _consolidate(self) -> None:
        assert self._min is not None
        by_degree: dict[int, HeapNode] = {}
        self._min.prev.next = None  # type: ignore[assignment]
        pending: Optional[HeapNode] = self._min
        while pending is not None:
            x = pending
            pending = pending.next
            while x.degree in by_degree:
                y = by_degree.pop(x.degree)
                if self._key(x.item) > self._key(y.item):
                    x, y = y, x
                self._link(y, x)
            by_degree[x.degree] = x

        self._min = None
        for degree in sorted(by_degree):
            node = by_degree[degree]
            if self._min is not None:
                _insert_before(node, self._min)
                if self._less(node, self._min):
                    self._min = node
            else:
                self._min = node
                node.next = node.prev = node

    def remove_min(self) -> Any:
        """Remove and return the smallest item."""
        top = self._min
        if top is None:
            raise IndexError("remove from an empty heap")
        item = top.item
        if self._size == 1:
            self._min = None
        else:
            child = top.child
            if child is not None:
                while child.parent is not None:
                    child.parent = None
                    child = child.next
                _splice(top, top.child)
            _unlink(top)
            self._min = top.next
            self._consolidate()
        top.child = None
        top.next = top.prev = top
        self._size -= 1
        return item

    def meld(self, other: "FibonacciHeap") -> None:
        """Move every item of ``other`` into this heap, leaving ``other`` empty."""
        if self._key is not other._key:
            raise ValueError("heaps with different key functions cannot be melded")
        if other._min is not None:
            if self._min is None:
                self._min = other._min
            else:
                new_min = self._min if self._less(self._min, other._min) else other._min
                _splice(self._min, other._min)
                self._min = new_min
            self._size += other._size
        other.clear()

    def _cut(self, node: HeapNode, parent: HeapNode) -> None:
        parent.degree -= 1
        if parent.degree == 0:
            parent.child = None
        if parent.child is node:
            parent.child = node.next
        _unlink(node)
        node.parent = None
        node.mark = False
        assert self._min is not None
        _insert_before(node, self._min)

    def _cascading_cut(self, node: HeapNode) -> None:
        parent = node.parent
        if parent is None:
            return
        if not node.mark:
            node.mark = True
        else:
            self._cut(node, parent)

    def decrease_key(self, node: HeapNode, item: Any) -> None:
        """Replace the node's item with one whose key is strictly smaller."""
        if self._key(node.item) <= self._key(item):
            raise ValueError("new item does not have a smaller key")
        node.item = item
        self.sift_decreased(node)

    def sift_decreased(self, node: HeapNode) -> None:
        """Restore heap order after the node's item key was lowered in place."""
        parent = node.parent
        if parent is not None and self._less(node, parent):
            self._cut(node, parent)
            self._cascading_cut(parent)
        assert self._min is not None
        if self._less(node, self._min):
            self._min = node

    def clear(self) -> None:
        """Drop every item."""
        self._min = None
        self._size = 0

    def _dump_node(self, node: HeapNode, indent: int, formatter, out: list) -> None:
        out.append(f"{' ' * indent}{formatter(node.item)}\n")
        child = node.child
        if child is None:
            return
        current = child
        while True:
            self._dump_node(current, indent + 2, formatter, out)
            current = current.next
            if current is node.child:
                break

    def dump(self, formatter: Callable[[Any], str] = str) -> str:
        """Return a textual picture of the heap's trees."""
        if self._min is None:
            return "(null)\n"
        out = [f"size = {self._size}\n", "min = "]
        node = self._min
        while True:
            self._dump_node(node, 0, formatter, out)
            node = node.next
            if node is self._min:
                break
        return "".join(out)