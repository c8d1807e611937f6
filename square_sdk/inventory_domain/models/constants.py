"""Enum-like string values documented by the Square inventory API.

Record models store these as plain strings; the enums exist for callers and for
the opt-in write validation. Being ``str`` subclasses, members compare equal to
their wire values and serialize as such.
"""

from enum import Enum


class InventoryState(str, Enum):
    """Lifecycle state of a tracked quantity of goods."""

    CUSTOM = "CUSTOM"
    IN_STOCK = "IN_STOCK"
    SOLD = "SOLD"
    RETURNED_BY_CUSTOMER = "RETURNED_BY_CUSTOMER"
    RESERVED_FOR_SALE = "RESERVED_FOR_SALE"
    SOLD_ONLINE = "SOLD_ONLINE"
    ORDERED_FROM_VENDOR = "ORDERED_FROM_VENDOR"
    RECEIVED_FROM_VENDOR = "RECEIVED_FROM_VENDOR"
    IN_TRANSIT_TO = "IN_TRANSIT_TO"
    NONE = "NONE"
    WASTE = "WASTE"
    UNLINKED_RETURN = "UNLINKED_RETURN"
    COMPOSED = "COMPOSED"
    DECOMPOSED = "DECOMPOSED"
    SUPPORTED_BY_NEWER_VERSION = "SUPPORTED_BY_NEWER_VERSION"
    IN_TRANSIT = "IN_TRANSIT"


class CatalogObjectType(str, Enum):
    # Inventory tracking only supports item variations
    ITEM_VARIATION = "ITEM_VARIATION"


class Product(str, Enum):
    """Square product that originated an inventory change."""

    SQUARE_POS = "SQUARE_POS"
    EXTERNAL_API = "EXTERNAL_API"
    BILLING = "BILLING"
    APPOINTMENTS = "APPOINTMENTS"
    INVOICES = "INVOICES"
    ONLINE_STORE = "ONLINE_STORE"
    PAYROLL = "PAYROLL"
    DASHBOARD = "DASHBOARD"
    ITEM_LIBRARY_IMPORT = "ITEM_LIBRARY_IMPORT"
    OTHER = "OTHER"
