"""Small stack and queue containers: a min-tracking stack and fixed-capacity ones."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._values: List[Any] = []
        self._minimums: List[Any] = []

    def push(self, value: Any) -> None:
        """Push value onto the stack."""
        if self._minimums and not self._minimums[-1] > value:
            self._minimums.append(self._minimums[-1])
        else:
            self._minimums.append(value)
        self._values.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if not self._values:
            raise IndexError("pop from an empty stack")
        self._minimums.pop()
        return self._values.pop()

    def top(self) -> Any:
        """Return the top value; IndexError if empty."""
        if not self._values:
            raise IndexError("top of an empty stack")
        return self._values[-1]

    def min(self) -> Any:
        """Return the smallest value on the stack; IndexError if empty."""
        if not self._minimums:
            raise IndexError("min of an empty stack")
        return self._minimums[-1]

    def __len__(self) -> int:
        return len(self._values)


class BoundedQueue:
    """A FIFO queue of fixed capacity; pushing onto a full queue drops the oldest value."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[Any] = deque(maxlen=capacity)

    def push(self, value: Any) -> None:
        """Append value at the back, discarding the front value if full."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class StackFullError(OverflowError):
    """Raised when pushing onto a bounded stack that is full."""


class BoundedStack:
    """A LIFO stack that holds at most a fixed number of values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def push(self, value: Any) -> None:
        """Push value; StackFullError if the stack is at capacity."""
        if len(self._items) >= self.capacity:
            raise StackFullError(f"stack is full ({self.capacity} values)")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)