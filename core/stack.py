"""core/stack.py - 有容量上限的栈"""


class BoundedStack:
    """基于list的LIFO栈，push超过容量时抛出指定的错误而不是截断"""

    def __init__(self, capacity, overflow_error):
        self.capacity = capacity
        self.overflow_error = overflow_error
        self._items = []

    def push(self, item):
        if len(self._items) >= self.capacity:
            raise self.overflow_error()
        self._items.append(item)

    def pop(self):
        return self._items.pop()

    def peek(self):
        return self._items[-1]

    def to_list(self):
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)
