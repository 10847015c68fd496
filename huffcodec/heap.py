"""
heap.py

Array backed binary min-heap ordered by node weight.

Ties are broken the same way every time: when choosing a child the left one
wins unless the right one is strictly lighter, and a node only moves when the
other node is strictly lighter. Equal weights therefore never reorder, which
keeps tree shapes reproducible for a given input order.
"""


from typing import Any, Iterable, List


class MinHeap:
    """
    Min-heap over items exposing a ``weight`` attribute.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = list(items)
        self.heapify()

    def heapify(self) -> None:
        """Arrange the whole array in heap order, bottom up, in O(n)."""
        end = len(self._items)
        for start in range(end // 2 - 1, -1, -1):
            self.sift_down(start, end)

    def sift_down(self, start: int, end: int) -> None:
        """
        Restore heap order for the subtree rooted at start, within items[0:end].

        Args:
            start (int): Index of the subtree root.
            end (int): Exclusive end of the active range.
        """
        items = self._items
        root = start
        while True:
            child = 2 * root + 1
            if child >= end:
                return
            if child + 1 < end and items[child + 1].weight < items[child].weight:
                child += 1
            if items[root].weight <= items[child].weight:
                return
            items[root], items[child] = items[child], items[root]
            root = child

    def sift_up(self, index: int) -> None:
        """Move the item at index towards the root until its parent is not heavier."""
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent].weight <= items[index].weight:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def push(self, item: Any) -> None:
        self._items.append(item)
        self.sift_up(len(self._items) - 1)

    def peek_min(self) -> Any:
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def pop_min(self) -> Any:
        """
        Remove and return the lightest item.

        The last item takes the root's place and the active range shrinks by one before
        sifting down.
        """
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        last = len(items) - 1
        items[0], items[last] = items[last], items[0]
        smallest = items.pop()
        self.sift_down(0, last)
        return smallest

    def is_valid(self) -> bool:
        """Check that no item is lighter than its parent."""
        items = self._items
        return all(items[(i - 1) // 2].weight <= items[i].weight for i in range(1, len(items)))

    def weights(self) -> List[int]:
        return [item.weight for item in self._items]

    def __repr__(self) -> str:
        return f"MinHeap({self.weights()})"

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
