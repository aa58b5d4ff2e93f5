"""
Plain-text rendering of a sale for the presentation layer.

Both renderers read the derived figures from ``Sale``; they never recompute
them.
"""

from __future__ import annotations

from pharmacy_modules.sales.sale import Sale

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_receipt(sale: Sale) -> str:
    """Customer receipt: header, one row per line item, totals and notes."""
    lines = [
        "===== RECEIPT =====",
        f"Transaction #: {sale.reference}",
        f"Date: {sale.created_at:{_TIMESTAMP_FORMAT}}",
        f"Pharmacist ID: {sale.pharmacist_id}",
    ]
    if sale.patient_id is not None:
        lines.append(f"Patient ID: {sale.patient_id}")
    if sale.prescription_id is not None:
        lines.append(f"Prescription ID: {sale.prescription_id}")

    lines += ["", "--- ITEMS ---"]
    for item in sale.line_items:
        lines.append(
            f"Item {item.item_id}: {item.quantity} x {item.unit_price.display()}"
            f" = {item.line_total.display()}"
        )

    lines += ["", "--- TOTALS ---", f"Subtotal: {sale.subtotal.display()}"]
    if sale.discount.is_positive:
        lines.append(f"Discount: -{sale.discount.display()}")
    lines += [
        f"Tax: {sale.tax_amount.display()}",
        f"TOTAL: {sale.total.display()}",
    ]
    if sale.refunded_amount.is_positive:
        lines.append(f"Refunded: {sale.refunded_amount.display()}")
    lines += [
        f"Payment Method: {sale.payment_method.label}",
        f"Status: {sale.status.label}",
    ]

    if sale.notes:
        lines += ["", f"Notes: {sale.notes}"]

    lines += ["", "Thank you for your business!", "=================="]
    return "\n".join(lines) + "\n"


def render_summary(sale: Sale) -> str:
    """One-screen summary; walk-in customers have no patient id."""
    patient = sale.patient_id if sale.patient_id is not None else "Walk-in"
    return "\n".join([
        f"Transaction: {sale.reference}",
        f"Date: {sale.created_at:{_TIMESTAMP_FORMAT}}",
        f"Pharmacist ID: {sale.pharmacist_id}",
        f"Patient ID: {patient}",
        f"Items: {len(sale.line_items)}",
        f"Total: {sale.total.display()}",
        f"Payment: {sale.payment_method.label}",
        f"Status: {sale.status.label}",
    ])
