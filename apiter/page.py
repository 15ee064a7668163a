class Page:
    """A rewindable, forward-only stream over the items of one page.

    Iterating consumes items from the read cursor; ``rewind`` moves the
    cursor back to the first item. The items themselves are never inspected.
    """

    def __init__(self, items=()):
        self._items = list(items)
        self._cursor = 0

    @property
    def items(self):
        return list(self._items)

    def rewind(self):
        self._cursor = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._cursor >= len(self._items):
            raise StopIteration
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self._items)
