from collections import UserDict


default_settings = {
    "page_size": 100,
    "cache": True,
    "delay": None,
}


class Settings(UserDict):
    def __init__(self, **kwargs):
        super().__init__()
        self.data.update(default_settings)
        self.data.update(kwargs)

    def __getattr__(self, name):
        try:
            return self.data[name]
        except KeyError:
            raise AttributeError("setting not found")


class Continuation:
    """Whether more pages follow: ``UNKNOWN``, ``END`` or ``total(n)``."""

    UNKNOWN = None
    END = None

    def __init__(self, kind, count=None):
        self.kind = kind
        self.count = count

    @classmethod
    def total(cls, count):
        return cls("total", count)

    def __eq__(self, other):
        if not isinstance(other, Continuation):
            return NotImplemented
        return (self.kind, self.count) == (other.kind, other.count)

    def __hash__(self):
        return hash((self.kind, self.count))

    def __repr__(self):
        if self.kind == "total":
            return "Continuation.total(%d)" % self.count
        return "Continuation.%s" % self.kind.upper()


Continuation.UNKNOWN = Continuation("unknown")
Continuation.END = Continuation("end")


class ListResult:
    # query is sent with the next call; None keeps it unchanged
    def __init__(self, items, continuation=Continuation.UNKNOWN, query=None):
        self.items = items
        self.continuation = continuation
        self.query = query

    def __repr__(self):
        return "<%s continuation=%r query=%r>" % (
            self.__class__.__name__,
            self.continuation,
            self.query,
        )


class PagedClient:
    """Interface for API clients that can list a resource page by page."""

    settings = None

    def list(self, options, query):
        """Return one page as a ``ListResult``.

        ``options`` holds ``page`` (1-based), ``limit`` and ``bypass_iterator``.
        """
        raise NotImplementedError("Subclasses must implement list")
