"""FIFO queue used by the breadth-first search."""

from collections import deque


class Queue[T]:
    """First-in first-out queue."""

    __slots__ = ("_elements",)

    def __init__(self) -> None:
        self._elements: deque[T] = deque()

    def enqueue(self, element: T) -> None:
        self._elements.append(element)

    def dequeue(self) -> T:
        """Remove and return the oldest element.

        Raises:
            IndexError: If the queue is empty.

        """
        if not self._elements:
            msg = "dequeue from an empty queue"
            raise IndexError(msg)
        return self._elements.popleft()

    def __len__(self) -> int:
        return len(self._elements)
