"""
Anchor page searches over a descending jump table.

Anchors are "round" page numbers (multiples of a jump value such as 50, 250
or 1000) placed between the boundary pages and the pages around the current
page, so a crawler can reach any page in a few hops.

The left and right searches use different tie-break rules and are kept as
separate functions:
- left: a descending chain, each call stepping back from the previous anchor
- right: a single ascending step refined towards finer jumps
"""

from collections.abc import Sequence

from deep_pagination.utils.constants import DEFAULT_JUMP_VALUES


def find_lower_value_for(
    min_page: int,
    value: int,
    iteration: int,
    pad: int,
    jumps: Sequence[int] = DEFAULT_JUMP_VALUES,
) -> int:
    """
    Find the next anchor below `value` on the left of the current page.

    The coarsest jump strictly smaller than `value` is selected. For each
    unused pad slot (`pad - iteration`) the jump is widened one level coarser
    while that still leaves room above `min_page`.

    Args:
        min_page: Floor of the search (the first page)
        value: Ceiling, the previous anchor or `current - pad - 1`
        iteration: Position in the chain, 0 for the anchor nearest the window
        pad: Pages shown on each side of the current page
        jumps: Strictly descending jump table

    Returns:
        The anchor page. Values <= `min_page` mean no anchor is left.

    Example:
        find_lower_value_for(1, 47, 0, 2) → 25
        find_lower_value_for(1, 25, 1, 2) → 15
    """
    jump_index = next(
        (index for index, jump in enumerate(jumps) if jump < value),
        len(jumps) - 1,
    )
    jump = jumps[jump_index]
    aligned = value - value % jump

    margin = 0
    for _ in range(pad - iteration):
        wider_index = jump_index - margin - 1
        if wider_index >= 0 and aligned - jumps[wider_index] > min_page:
            margin += 1

    if iteration <= 0:
        anchor = value - jump if value % jump == 0 else aligned
        if margin:
            anchor -= jumps[jump_index - margin]
        return anchor

    return value - jumps[jump_index - margin]


def find_larger_value_for(
    min_page: int,
    max_page: int,
    iteration: int,
    jumps: Sequence[int] = DEFAULT_JUMP_VALUES,
) -> int:
    """
    Find the next anchor above `min_page` on the right of the current page.

    Starts from the coarsest jump whose next multiple after `min_page` stays
    below `max_page`, then moves up to `iteration` levels finer while the
    finer multiple also stays below `max_page`.

    Returns:
        `min_page` rounded up to the next multiple of the chosen jump
        (`min_page + jump` when already aligned). May reach `max_page` when no
        jump fits; callers treat that as "no anchor".

    Example:
        find_larger_value_for(54, 100, 2) → 55
        find_larger_value_for(60, 100, 0) → 75
    """

    def next_multiple(jump: int) -> int:
        return min_page - min_page % jump + jump

    jump_index = next(
        (
            index
            for index, jump in enumerate(jumps)
            if jump < max_page and next_multiple(jump) < max_page
        ),
        len(jumps) - 1,
    )

    for _ in range(iteration):
        finer_index = jump_index + 1
        if finer_index < len(jumps) and next_multiple(jumps[finer_index]) < max_page:
            jump_index = finer_index

    return next_multiple(jumps[jump_index])
