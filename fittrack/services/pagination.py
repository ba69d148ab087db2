from typing import List, Optional, Sequence, Tuple, TypeVar

from fittrack.core.config import settings
from fittrack.core.exceptions import InvalidArgument
from fittrack.schemas.common import Page

T = TypeVar("T")


def paginate(page: int, page_size: Optional[int] = None) -> Page:
    """Включительный диапазон строк для страницы (нумерация страниц с 1)."""
    page_size = page_size or settings.PAGE_SIZE
    if page < 1:
        raise InvalidArgument(f"Номер страницы начинается с 1, получено {page}")
    if page_size < 1:
        raise InvalidArgument(f"Размер страницы должен быть положительным, получено {page_size}")
    start = (page - 1) * page_size
    return Page(page=page, page_size=page_size, start=start, end=start + page_size - 1)


def has_more(rows_returned: int, page_size: Optional[int] = None) -> bool:
    return rows_returned == (page_size or settings.PAGE_SIZE)


def page_of(items: Sequence[T], page: int, page_size: Optional[int] = None) -> Tuple[Page, List[T]]:
    """Страница уже упорядоченного списка и её границы."""
    bounds = paginate(page, page_size)
    return bounds, list(items[bounds.start:bounds.end + 1])
