"""Banked access to ROM and RAM regions split into fixed-size pages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class PagerError(Exception):
    """Raised when a page or an offset falls outside the paged memory."""


class PageSize(IntEnum):
    ONE_KB = 0x400
    FOUR_KB = 0x1000
    EIGHT_KB = 0x2000
    SIXTEEN_KB = 0x4000


class PageKind(Enum):
    FIRST = "first"
    LAST = "last"
    NUMBER = "number"
    FROM_END = "from_end"


@dataclass(frozen=True)
class Page:
    """A page selector: which page of a given size to address."""

    kind: PageKind
    size: PageSize
    n: int = 0

    @classmethod
    def first(cls, size: PageSize) -> Page:
        return cls(PageKind.FIRST, size)

    @classmethod
    def last(cls, size: PageSize) -> Page:
        return cls(PageKind.LAST, size)

    @classmethod
    def number(cls, n: int, size: PageSize) -> Page:
        return cls(PageKind.NUMBER, size, n)

    @classmethod
    def from_end(cls, n: int, size: PageSize) -> Page:
        """The n-th page counted back from the last one (0 is the last)."""
        return cls(PageKind.FROM_END, size, n)


class Pager:
    """A byte buffer addressed through page selectors."""

    def __init__(self, data: bytes | bytearray) -> None:
        self.data = bytearray(data)

    def read(self, page: Page, offset: int) -> int:
        return self.data[self.index(page, offset)]

    def write(self, page: Page, offset: int, value: int) -> None:
        self.data[self.index(page, offset)] = value

    def page_count(self, size: PageSize) -> int:
        count, remainder = divmod(len(self.data), int(size))
        if remainder:
            raise PagerError("page size must divide evenly into data length")
        return count

    def index(self, page: Page, offset: int) -> int:
        size = int(page.size)
        last_page = self.page_count(page.size) - 1

        if page.kind is PageKind.FIRST:
            n = 0
        elif page.kind is PageKind.LAST:
            n = last_page
        elif page.kind is PageKind.NUMBER:
            n = page.n
        else:
            n = last_page - page.n

        if offset < 0 or offset > size:
            raise PagerError("offset cannot exceed page bounds")
        if n < 0 or n > last_page:
            raise PagerError("page out of bounds")
        return n * size + offset