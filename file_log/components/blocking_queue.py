import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class BlockingQueue(Generic[T]):
    """Unbounded FIFO handing items from any number of producers to consumers.

    enqueue() never blocks. dequeue() blocks the calling thread until an item
    is available. clear() drops every pending item and wakes blocked
    dequeuers, which then return None instead of waiting again, so None is
    reserved and must not be enqueued.
    """

    def __init__(self):
        self._items: Deque[T] = deque()
        self._ready = threading.Condition(threading.Lock())
        # bumped by clear(); a waiter that sees it change was cleared out
        self._generation = 0

    def enqueue(self, item: T) -> None:
        if item is None:
            raise ValueError("None cannot be enqueued")
        with self._ready:
            self._items.append(item)
            if len(self._items) == 1:
                # empty -> non-empty, wake any blocked dequeue
                self._ready.notify_all()

    def dequeue(self) -> Optional[T]:
        """Remove and return the head item, waiting for one if necessary.

        Returns None only when clear() was called while waiting.
        """
        with self._ready:
            generation = self._generation
            while not self._items:
                self._ready.wait()
                if self._generation != generation:
                    return None
            return self._items.popleft()

    def clear(self) -> None:
        with self._ready:
            self._items.clear()
            self._generation += 1
            self._ready.notify_all()

    def __len__(self) -> int:
        with self._ready:
            return len(self._items)
