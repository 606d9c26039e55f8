"""
Pagination sequence construction.

Builds the ordered list of page tokens (page numbers and gap symbols) shown
by a pagination control. Small page counts list every page; larger ones show
the first and last page, a window around the current page and a few anchor
pages on either side separated by gaps.
"""

from collections.abc import Sequence

from deep_pagination.models.pagination import PageToken
from deep_pagination.pagination.jumps import find_larger_value_for, find_lower_value_for
from deep_pagination.utils.constants import (
    POSITION_CENTER,
    POSITION_LEFT,
    POSITION_RIGHT,
    get_min_pages_for_complex,
)


def _is_page(token: PageToken | None) -> bool:
    return isinstance(token, int)


def _reopen_gap(pagination: list[PageToken], gap_symbol: str) -> None:
    """Insert a gap at the nearest discontinuity, scanning backwards."""
    for index in range(len(pagination) - 2, -1, -1):
        token = pagination[index]
        if not _is_page(token) or token + 1 != pagination[index + 1]:
            pagination.insert(index + 1, gap_symbol)
            return


def add_page(
    pagination: list[PageToken],
    page: int,
    position: int,
    gap_symbol: str,
) -> None:
    """
    Append a page to the working sequence, closing one-page gaps.

    Rules:
    - If the sequence ends with [page - 2, gap], the gap is replaced by
      page - 1 and page is appended. On the left side and for the window
      (position < 1) the gap is re-opened at the nearest remaining
      discontinuity so the side keeps its single gap marker.
    - Otherwise page is appended unless it is already the last token.
    - A leading [1, gap, 3] is always rewritten to [1, 2, 3].

    Args:
        pagination: Working sequence, modified in place
        page: Page number to append
        position: POSITION_LEFT, POSITION_CENTER or POSITION_RIGHT
        gap_symbol: Token used for omitted pages
    """
    last = pagination[-1] if pagination else None
    second_last = pagination[-2] if len(pagination) > 1 else None

    if last == gap_symbol and _is_page(second_last) and second_last == page - 2:
        pagination[-1] = page - 1
        pagination.append(page)

        if position < POSITION_RIGHT:
            _reopen_gap(pagination, gap_symbol)

    elif last != page:
        pagination.append(page)

    if len(pagination) > 2 and pagination[1] == gap_symbol and pagination[2] == 3:
        pagination[1] = 2


def _add_lower_anchors(
    pagination: list[PageToken],
    *,
    current: int,
    pad: int,
    gap_symbol: str,
    jump_values: Sequence[int],
) -> None:
    """Insert up to pad + 1 anchors left of the window, then the left gap."""
    value = current - pad - 1
    anchors: list[int] = []

    for iteration in range(pad + 1):
        value = find_lower_value_for(1, value, iteration, pad, jump_values)
        if value > 1 and value not in pagination:
            anchors.append(value)

    for anchor in reversed(anchors):
        add_page(pagination, anchor, POSITION_LEFT, gap_symbol)

    pagination.append(gap_symbol)


def build_pagination_array(
    current: int,
    max_page: int,
    pad: int,
    gap_symbol: str,
    jump_values: Sequence[int],
) -> list[PageToken]:
    """
    Build the page token sequence for an already validated request.

    The walk visits pages in ascending order but jumps over stretches that
    cannot change the result, so the cost depends on the number of tokens
    rather than on max_page.

    Example:
        build_pagination_array(50, 100, 2, "…", DEFAULT_JUMP_VALUES)
        → [1, 5, 15, 25, "…", 48, 49, 50, 51, 52, "…", 55, 60, 75, 100]
    """
    min_pages_for_complex = get_min_pages_for_complex(pad)

    if max_page < min_pages_for_complex:
        return list(range(1, max_page + 1))

    pagination: list[PageToken] = []
    window_start = current - pad
    window_end = current + pad

    page = 1
    while page <= max_page:
        next_page = page + 1

        if page in (1, max_page, current):
            add_page(pagination, page, POSITION_CENTER, gap_symbol)

        elif (
            page < current
            and gap_symbol not in pagination
            and len(pagination) < pad + 2
        ):
            _add_lower_anchors(
                pagination,
                current=current,
                pad=pad,
                gap_symbol=gap_symbol,
                jump_values=jump_values,
            )
            next_page = max(next_page, window_start)

        elif window_start <= page <= window_end:
            add_page(pagination, page, POSITION_CENTER, gap_symbol)

        elif page < current:
            # Left of the window with the gap already placed
            next_page = max(next_page, window_start)

        elif page == window_end + 1 and page != max_page - 1:
            pagination.append(gap_symbol)

        elif len(pagination) < min_pages_for_complex - 1:
            next_page = _add_upper_anchor(
                pagination,
                page=page,
                max_page=max_page,
                budget=min_pages_for_complex - len(pagination) - 2,
                gap_symbol=gap_symbol,
                jump_values=jump_values,
            )

        else:
            # Anchor budget spent, only the last page is left
            next_page = max_page

        page = next_page

    return pagination


def _add_upper_anchor(
    pagination: list[PageToken],
    *,
    page: int,
    max_page: int,
    budget: int,
    gap_symbol: str,
    jump_values: Sequence[int],
) -> int:
    """Append one anchor right of the window and return the next page to visit."""
    last = pagination[-1]
    base = page if last == gap_symbol else last
    value = find_larger_value_for(base, max_page, budget, jump_values)

    if value < max_page:
        add_page(pagination, value, POSITION_RIGHT, gap_symbol)
        return page + 1

    if page > base or last == gap_symbol:
        add_page(pagination, page, POSITION_RIGHT, gap_symbol)
        return page + 1

    # Pages up to the last anchor are already covered
    return base + 1
