class InvalidPageIndex(ValueError):
    pass


class InvalidDelay(ValueError):
    pass
