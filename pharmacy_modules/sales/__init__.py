"""
Sales Module.

The sale pricing pipeline:
- Sale: line items, discount, tax and total with a pending/completed/
  refunded/cancelled lifecycle
- SALE_WORKFLOW: the lifecycle declared as data
- Receipt and summary rendering
"""

from pharmacy_modules.sales.config import SalesConfig
from pharmacy_modules.sales.helpers import (
    SaleTotals,
    compute_totals,
    percentage_to_amount,
    qualifies_for_bulk_discount,
)
from pharmacy_modules.sales.models import LineItem, PaymentMethod, SaleStatus
from pharmacy_modules.sales.receipt import render_receipt, render_summary
from pharmacy_modules.sales.sale import Sale
from pharmacy_modules.sales.workflows import SALE_WORKFLOW

__all__ = [
    "LineItem",
    "PaymentMethod",
    "SALE_WORKFLOW",
    "Sale",
    "SaleStatus",
    "SaleTotals",
    "SalesConfig",
    "compute_totals",
    "percentage_to_amount",
    "qualifies_for_bulk_discount",
    "render_receipt",
    "render_summary",
]
