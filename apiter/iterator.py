import logging
import time
from collections.abc import Mapping
from apiter import exceptions
from apiter.client import Settings
from apiter.page import Page


logger = logging.getLogger(__name__)

NANOSECONDS = 1_000_000_000


def parse_delay(delay):
    if delay is None:
        return None

    if isinstance(delay, Mapping):
        try:
            seconds, nanoseconds = delay["seconds"], delay["nanoseconds"]
        except KeyError as e:
            raise exceptions.InvalidDelay("delay is missing %s" % e) from e
    else:
        try:
            seconds, nanoseconds = delay
        except (TypeError, ValueError) as e:
            raise exceptions.InvalidDelay(
                "delay must be a (seconds, nanoseconds) pair, got %r" % (delay,)
            ) from e

    for name, value in (("seconds", seconds), ("nanoseconds", nanoseconds)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise exceptions.InvalidDelay(
                "delay %s must be an integer, got %r" % (name, value)
            )
        if value < 0:
            raise exceptions.InvalidDelay(
                "delay %s must not be negative, got %d" % (name, value)
            )

    # Same range as nanosleep(2); whole seconds belong in ``seconds``.
    if nanoseconds >= NANOSECONDS:
        raise exceptions.InvalidDelay(
            "delay nanoseconds must be less than %d (one second, as for "
            "nanosleep), got %d" % (NANOSECONDS, nanoseconds)
        )
    return seconds, nanoseconds


class PageIterator:
    """Iterate over the pages of a paged API resource, caching fetched pages."""

    def __init__(
        self, client, page_index=None, limit=None, query=None, cache=None, delay=None
    ):
        self.client = client
        settings = getattr(client, "settings", None)
        if not isinstance(settings, Settings):
            settings = Settings()

        self._position = page_index or 1
        self._limit = limit or settings.page_size
        self._query = dict(query or {})
        self._cache = settings.cache if cache is None else cache
        self._delay = parse_delay(settings.delay if delay is None else delay)
        self._count = None
        self._pages = {}

    def rewind(self):
        self._position = 1

    def key(self):
        return self._position

    def set_key(self, page_index):
        self._position = page_index

    def valid(self):
        if self._position < 1:
            return False

        # The total is unknown until the client tells us.
        if self._count is not None and self._position > self._count:
            return False

        return True

    def current(self):
        page = self._pages.get(self._position)
        if self._cache and page is not None:
            logger.debug("Page %d served from cache", self._position)
            page.rewind()
            return page

        logger.debug("Fetching page %d (limit %d)", self._position, self._limit)
        result = self.client.list(
            {
                "bypass_iterator": True,
                "page": self._position,
                "limit": self._limit,
            },
            dict(self._query),
        )

        page = result.items
        if not isinstance(page, Page):
            page = Page(page)
        self._pages[self._position] = page
        self._update_count(result.continuation)
        if result.query is not None:
            self._query = dict(result.query)

        page.rewind()
        if self._delay:
            self._sleep()
        return page

    def next(self):
        # Drop pages we are leaving behind when results are not reused.
        if not self._cache:
            self._pages.pop(self._position, None)

        self._position += 1

    def move(self, page_index):
        self._position = page_index

        if not self.valid():
            raise exceptions.InvalidPageIndex(
                'Page "%s" is either an invalid page index or it exceeds the '
                "total number of pages available." % page_index
            )

    def get(self, page_index):
        self.move(page_index)
        return self.current()

    def count(self):
        if self._count:
            return self._count
        return None

    def set_count(self, count):
        self._count = count

    def cache(self):
        return self._cache

    def set_cache(self, cache):
        self._cache = cache

    def get_all_items(self):
        """Fetch every page from the first to the last and return all items.

        The iterator is rewound to the first page afterwards.
        """
        return list(self.items())

    def items(self):
        for page in self:
            yield from page

    def __iter__(self):
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()
        self.rewind()

    def _update_count(self, continuation):
        if continuation.kind == "end":
            count = self._position
        elif continuation.kind == "total":
            count = continuation.count
        else:
            return

        # A known total never decreases.
        if self._count is not None and count < self._count:
            logger.debug(
                "Ignoring total of %d page(s), %d already known", count, self._count
            )
            return
        self._count = count
        logger.debug("Resource has %d page(s)", self._count)

    def _sleep(self):
        seconds, nanoseconds = self._delay
        logger.debug(
            "Sleeping %d.%09ds after page %d", seconds, nanoseconds, self._position
        )
        time.sleep(seconds + nanoseconds / NANOSECONDS)

    def __repr__(self):
        return "<%s page=%d count=%r>" % (
            self.__class__.__name__,
            self._position,
            self._count,
        )
