"""Entry point: load an inventory transfer document, report on it and optionally re-export it.

Usage: python main.py <transfers.json> [<output.json>]

Transfers that would fail a write request are reported, ignoring the 24 hour
occurred_at window since loaded records are usually historical.
"""

import logging
import sys

from square_sdk.common.exceptions.custom_exceptions import ApplicationError
from square_sdk.common.logger_config import setup_logging
from square_sdk.inventory_domain.application.inventory_transfer_service import InventoryTransferService
from square_sdk.inventory_domain.domain.services.transfer_validation import validate_transfer_for_write

logger = logging.getLogger(__name__)


def run(input_path: str, output_path: str | None = None) -> int:
    """Loads transfers, logs a summary of each and writes them back out if asked. Returns an exit code."""
    service = InventoryTransferService()
    try:
        transfers = service.load_transfers(input_path)
    except ApplicationError as e:
        logger.error(f"Could not load transfers: {e}")
        return 1

    for transfer in transfers[:5]:  # Print first 5 transfers as example
        logger.info(
            f"Transfer {transfer.id or '-'}: {transfer.quantity} of {transfer.catalog_object_id} "
            f"from {transfer.from_location_id} to {transfer.to_location_id} ({transfer.state})"
        )
        issues = validate_transfer_for_write(transfer, check_time_window=False)
        if issues:
            logger.warning(f"  Would be rejected on write: {'; '.join(issues)}")
    if len(transfers) > 5:
        logger.info(f"... and {len(transfers) - 5} more transfers.")

    if output_path:
        try:
            service.export_transfers(transfers, output_path)
        except ApplicationError as e:
            logger.error(f"Could not export transfers: {e}")
            return 1
    return 0


if __name__ == "__main__":
    setup_logging()
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(run(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
