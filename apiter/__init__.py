from apiter.client import Continuation, ListResult, PagedClient, Settings
from apiter.exceptions import InvalidDelay, InvalidPageIndex
from apiter.iterator import PageIterator
from apiter.page import Page

__all__ = [
    "Continuation",
    "InvalidDelay",
    "InvalidPageIndex",
    "ListResult",
    "Page",
    "PageIterator",
    "PagedClient",
    "Settings",
]
