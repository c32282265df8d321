"""Errors shared by the search engines."""


class SearchLimitExceeded(RuntimeError):
    """Raised when an iterative search runs past its iteration guard."""

    def __init__(self, what: str, limit: int):
        super().__init__(f"{what} exceeded {limit} iterations")
        self.what = what
        self.limit = limit
