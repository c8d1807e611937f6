# inventory_domain/application/inventory_transfer_service.py
"""Application service for reading and writing inventory transfer documents."""

import json
import logging
from pathlib import Path
from typing import Any

from square_sdk.common.config.settings import settings
from square_sdk.common.exceptions.custom_exceptions import ApplicationError, SerializationError
from square_sdk.common.serialization import json_codec
from square_sdk.inventory_domain.models.inventory_transfer import InventoryTransfer

logger = logging.getLogger(__name__)


class InventoryTransferService:
    """Loads transfers from JSON files and exports them back out."""

    def __init__(self, include_nulls: bool | None = None, indent: int | None = None) -> None:
        self.include_nulls = settings.SERIALIZE_NULLS if include_nulls is None else include_nulls
        self.indent = settings.JSON_INDENT if indent is None else indent

    def parse_transfers(self, payload: Any) -> list[InventoryTransfer]:
        """
        Decodes transfers from an already-parsed JSON document.
        Accepts a single transfer object, a list of them, or a list response
        shaped like ``{"transfers": [...]}``.
        """
        if isinstance(payload, dict) and "transfers" in payload:
            items = payload["transfers"] or []
        elif isinstance(payload, dict):
            items = [payload]
        elif isinstance(payload, list):
            items = payload
        else:
            raise SerializationError(f"Unsupported transfer document of type {type(payload).__name__}")

        if not isinstance(items, list):
            raise SerializationError("'transfers' must be a JSON array")

        return [json_codec.from_dict(InventoryTransfer, item) for item in items]

    def load_transfers(self, file_path: str | Path) -> list[InventoryTransfer]:
        """Reads a JSON file and returns the transfers it contains."""
        path = Path(file_path)
        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError as e:
            raise ApplicationError(f"Transfer file not found at {path}", original_exception=e)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON in transfer file {path}", original_exception=e)
        except UnicodeDecodeError as e:
            raise SerializationError(f"Transfer file {path} is not valid UTF-8", original_exception=e)
        except OSError as e:
            raise ApplicationError(f"Could not read transfer file {path}", original_exception=e)

        transfers = self.parse_transfers(payload)
        logger.info(f"Loaded {len(transfers)} inventory transfer(s) from {path}")
        return transfers

    def export_transfers(self, transfers: list[InventoryTransfer], file_path: str | Path) -> None:
        """Writes transfers to a JSON file as ``{"transfers": [...]}``."""
        path = Path(file_path)
        document = {"transfers": [json_codec.to_dict(t, include_nulls=self.include_nulls) for t in transfers]}
        try:
            text = json.dumps(document, indent=self.indent)
        except (TypeError, ValueError) as e:
            raise SerializationError("Transfers contain values that cannot be written as JSON", original_exception=e)
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ApplicationError(f"Could not write transfer file {path}", original_exception=e)
        logger.info(f"Exported {len(transfers)} inventory transfer(s) to {path}")
