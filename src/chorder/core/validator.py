"""Capacity validation for the options table."""

import logging

from chorder.exceptions import CapacityExceededError
from chorder.models import ChorderConfig

logger = logging.getLogger(__name__)


def validate(config: ChorderConfig) -> None:
    """
    Check that every page fits in the grid.

    Fails on the first page whose option count exceeds
    ``max_rows * max_columns``. Pages are checked in table order, but which
    page is reported when several are too large is not part of the contract.

    Raises:
        CapacityExceededError: With the page name, slot limit and option count
    """
    limit = config.capacity
    for page, records in config.options.items():
        if len(records) > limit:
            logger.error(f"Page {page!r} has {len(records)} options, limit is {limit}")
            raise CapacityExceededError(page=page, limit=limit, actual=len(records))

    logger.debug(f"Validated {len(config.options)} page(s) against {limit} slots")
