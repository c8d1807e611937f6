# tests/conftest.py
from datetime import datetime

import pytest
import pytz

from square_sdk.common.config.settings import settings
from square_sdk.inventory_domain.models.inventory_transfer import InventoryTransfer
from square_sdk.inventory_domain.models.source_application import SourceApplication


@pytest.fixture(autouse=True)
def mock_settings_serialization(mocker) -> None:
    """Pins the serialization settings so tests don't depend on the environment."""
    mocker.patch.object(settings, "SERIALIZE_NULLS", False)
    mocker.patch.object(settings, "JSON_INDENT", 2)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 12, 0, 0, tzinfo=pytz.utc)


@pytest.fixture
def sample_source_application() -> SourceApplication:
    return SourceApplication(product="EXTERNAL_API", application_id="sq0idp-APP1", name="Warehouse Sync")


@pytest.fixture
def sample_transfer_payload() -> dict:
    """A transfer as returned by the Square API."""
    return {
        "id": "UDMOEO78BG6GYWA2XDRYX3KB",
        "reference_id": "4a366069-4096-47a2-99a5-0084ac879509",
        "state": "IN_STOCK",
        "from_location_id": "C6W5YS5QM06F5",
        "to_location_id": "59TNP9SA8VGDA",
        "catalog_object_id": "W62UWFY35CWMYGVWK6TWJDNI",
        "catalog_object_type": "ITEM_VARIATION",
        "quantity": "3.00000",
        "occurred_at": "2024-03-15T10:30:00.000Z",
        "created_at": "2024-03-15T10:31:02.512Z",
        "source": {"product": "EXTERNAL_API", "application_id": "sq0idp-APP1", "name": "Warehouse Sync"},
        "employee_id": "AV7ZkCjEGAtaYQgkmjXK",
    }


@pytest.fixture
def sample_transfer(sample_source_application) -> InventoryTransfer:
    return InventoryTransfer(
        id="UDMOEO78BG6GYWA2XDRYX3KB",
        reference_id="4a366069-4096-47a2-99a5-0084ac879509",
        state="IN_STOCK",
        from_location_id="C6W5YS5QM06F5",
        to_location_id="59TNP9SA8VGDA",
        catalog_object_id="W62UWFY35CWMYGVWK6TWJDNI",
        catalog_object_type="ITEM_VARIATION",
        quantity="3.00000",
        occurred_at="2024-03-15T10:30:00.000Z",
        created_at="2024-03-15T10:31:02.512Z",
        source=sample_source_application,
        employee_id="AV7ZkCjEGAtaYQgkmjXK",
    )
