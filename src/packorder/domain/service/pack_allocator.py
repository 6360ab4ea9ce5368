"""Domain service: Pack Allocation.

Decides which packs make up a requested quantity.  Packs are tried
largest first at every level, and the first candidate whose remainder
can itself be packed wins; nothing above that point is revisited.
This favours big packs but is not guaranteed to use the fewest packs
(sizes 1, 3, 4 pack 6 as 1 + 1 + 4).  Callers and tests depend on this
exact traversal, so it must not be swapped for an optimal search.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from packorder.domain.exceptions import ValidationError
from packorder.domain.model.allocation import Allocation
from packorder.domain.model.pack import Pack

logger = logging.getLogger(__name__)


def allocate_packs(packs: Sequence[Pack], quantity: int) -> Allocation:
    """Select packs whose sizes sum exactly to ``quantity``.

    Returns an Allocation with ``remainder == 0`` on success.  On failure
    the remainder is the last delta computed at the top level (the one
    for the smallest pack), which is never 0.
    """
    if quantity <= 0:
        raise ValidationError(f"Allocation quantity must be positive, got {quantity}")
    if not packs:
        raise ValidationError("Cannot allocate without any packs")

    ascending = sorted(packs, key=lambda pack: pack.size)
    candidates = tuple(reversed(ascending))

    # qty -> remainder left at that level; qty -> pack committed there on success
    remainders: dict[int, int] = {}
    committed: dict[int, Pack] = {}

    def search(qty: int) -> int:
        if qty in remainders:
            return remainders[qty]

        remainder = qty
        for pack in candidates:
            remainder = qty - pack.size
            if remainder > 0:
                if search(remainder) == 0:
                    committed[qty], remainder = pack, 0
                    break
            elif remainder == 0:
                committed[qty] = pack
                break

        remainders[qty] = remainder
        return remainder

    # Fill the table bottom-up so each recursive step hits a cached
    # sub-result and the stack stays shallow for large quantities.
    for qty in range(ascending[0].size + 1, quantity):
        search(qty)
    remainder = search(quantity)

    if remainder != 0:
        logger.debug("qty:%d cannot be packed (remainder %d)", quantity, remainder)
        return Allocation(quantity=quantity, packs=(), remainder=remainder)

    selected: list[Pack] = []
    qty = quantity
    while qty > 0:
        pack = committed[qty]
        selected.append(pack)
        qty -= pack.size
    selected.reverse()

    logger.debug(
        "qty:%d packed as %s", quantity, " + ".join(str(p.size) for p in selected)
    )
    return Allocation(quantity=quantity, packs=tuple(selected), remainder=0)
