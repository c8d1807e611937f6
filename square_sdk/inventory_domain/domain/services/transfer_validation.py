"""Client-side checks for transfers about to be sent in a write request.

Nothing in the model, builder or codec calls these; they mirror rules the
Square API applies on its side so callers can fail early if they choose to.
"""

import logging
import re
from datetime import datetime, timedelta

from square_sdk.common.exceptions.custom_exceptions import TransferValidationError
from square_sdk.common.utils.date_utils import parse_rfc3339, utc_now
from square_sdk.inventory_domain.models.constants import CatalogObjectType, InventoryState
from square_sdk.inventory_domain.models.inventory_transfer import InventoryTransfer

logger = logging.getLogger(__name__)

MAX_QUANTITY_SCALE = 5
OCCURRED_AT_MAX_AGE = timedelta(hours=24)

_QUANTITY_RE = re.compile(r"[0-9]+(?:\.([0-9]+))?")
_KNOWN_STATES = {state.value for state in InventoryState}


def validate_transfer_for_write(
    transfer: InventoryTransfer, now: datetime | None = None, check_time_window: bool = True
) -> list[str]:
    """Returns the problems found with ``transfer``; an empty list means it looks acceptable.

    With ``check_time_window`` false, ``occurred_at`` only has to be a valid RFC 3339
    timestamp. Use that for historical records, which are always outside the window.
    """
    now = now or utc_now()
    issues: list[str] = []

    if transfer.catalog_object_type is not None and transfer.catalog_object_type != CatalogObjectType.ITEM_VARIATION:
        issues.append(
            f"catalog_object_type must be {CatalogObjectType.ITEM_VARIATION.value}, got {transfer.catalog_object_type!r}"
        )

    if transfer.state is not None and transfer.state not in _KNOWN_STATES:
        issues.append(f"Unknown inventory state {transfer.state!r}")

    if transfer.quantity is not None:
        match = _QUANTITY_RE.fullmatch(transfer.quantity) if isinstance(transfer.quantity, str) else None
        if not match:
            issues.append(f"quantity must be a non-negative decimal string, got {transfer.quantity!r}")
        elif match.group(1) and len(match.group(1)) > MAX_QUANTITY_SCALE:
            issues.append(f"quantity supports at most {MAX_QUANTITY_SCALE} digits after the decimal point")

    if transfer.occurred_at is not None:
        occurred_at = parse_rfc3339(transfer.occurred_at)
        if occurred_at is None:
            issues.append(f"occurred_at is not an RFC 3339 timestamp: {transfer.occurred_at!r}")
        elif check_time_window and occurred_at > now:
            issues.append("occurred_at cannot be in the future")
        elif check_time_window and now - occurred_at > OCCURRED_AT_MAX_AGE:
            issues.append("occurred_at cannot be older than 24 hours")

    if issues:
        logger.debug(f"Transfer {transfer.reference_id or transfer.id} failed {len(issues)} check(s)")
    return issues


def ensure_valid_for_write(transfer: InventoryTransfer, now: datetime | None = None) -> InventoryTransfer:
    """Raises TransferValidationError when ``transfer`` fails any write check, otherwise returns it."""
    issues = validate_transfer_for_write(transfer, now=now)
    if issues:
        raise TransferValidationError(issues)
    return transfer
