"""
Sale Pricing Pipeline (``pharmacy_modules.sales.sale``).

Responsibility
--------------
``Sale`` accumulates line items, derives subtotal, discount, tax and total
after every mutation, and drives the sale through its lifecycle:

    pending --complete--> completed --refund--> refunded
                                    --partial_refund--> partially_refunded
    pending --cancel--> cancelled

Every status change is looked up in ``SALE_WORKFLOW``; an action with no
transition from the current status is rejected.

Invariants
----------
- ``subtotal == sum(line.line_total)``.
- ``discount <= subtotal``.
- ``tax_amount == (subtotal - discount) * tax_rate`` rounded to cents.
- ``total == subtotal - discount + tax_amount``.
- Line items and discounts change only while the sale is pending.
- ``refunded_amount <= total``.
- Check-then-apply: a rejected operation leaves every field unchanged.

Failure Modes
-------------
- ``NotModifiableError``: line item or discount change outside pending.
- ``InvalidQuantityError``: non-positive line quantity.
- ``CurrencyMismatchError``: price, discount or refund in another currency.
- ``InvalidDiscountError``: discount above subtotal or percentage out of range.
- ``EmptySaleError``: completing a sale with no line items.
- ``InvalidStateTransitionError``: cancelling a sale that is not pending.
- ``InvalidRefundError``: zero refund or refund above the refundable amount.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Hashable

from pharmacy_kernel.domain.clock import Clock, SystemClock
from pharmacy_kernel.domain.values import Money
from pharmacy_kernel.exceptions import (
    CurrencyMismatchError,
    EmptySaleError,
    InvalidDiscountError,
    InvalidRefundError,
    InvalidStateTransitionError,
    NotModifiableError,
)
from pharmacy_kernel.logging_config import LogContext, get_logger
from pharmacy_kernel.utils.reference import generate_reference
from pharmacy_modules.sales.config import SalesConfig
from pharmacy_modules.sales.helpers import (
    SaleTotals,
    compute_totals,
    percentage_to_amount,
    qualifies_for_bulk_discount,
)
from pharmacy_modules.sales.models import LineItem, PaymentMethod, SaleStatus
from pharmacy_modules.sales.workflows import SALE_WORKFLOW

logger = get_logger("modules.sales.sale")


def _require_positive_id(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field_name} must be a positive integer (got {value!r})")


class Sale:
    """
    One point-of-sale transaction.

    Contract
    --------
    Created pending with zero totals.  Totals are derived and never set
    directly; readers use the ``subtotal``, ``discount``, ``tax_amount`` and
    ``total`` properties.

    Non-goals
    ---------
    - Does NOT touch the stock ledger.  Callers issue stock explicitly.
    - Does NOT convert currencies.
    """

    def __init__(
        self,
        pharmacist_id: int,
        *,
        patient_id: int | None = None,
        prescription_id: int | None = None,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        config: SalesConfig | None = None,
        clock: Clock | None = None,
        reference: str | None = None,
    ):
        _require_positive_id(pharmacist_id, "pharmacist_id")
        if patient_id is not None:
            _require_positive_id(patient_id, "patient_id")
        if prescription_id is not None:
            _require_positive_id(prescription_id, "prescription_id")

        config = config or SalesConfig.with_defaults()
        self._clock = clock or SystemClock()

        # Pricing settings are fixed for the life of the sale.
        self._currency = config.currency
        self._tax_rate = config.tax_rate
        self._bulk_discount_threshold = config.bulk_discount_threshold
        self._bulk_discount_rate = config.bulk_discount_rate

        self.pharmacist_id = pharmacist_id
        self.patient_id = patient_id
        self.prescription_id = prescription_id
        self.payment_method = payment_method
        self.notes: str | None = None
        self.reference = reference or generate_reference(
            config.transaction_prefix, self._clock
        )
        self.status = SaleStatus(SALE_WORKFLOW.initial_state)
        self.created_at: datetime = self._clock.now()
        self.updated_at: datetime = self.created_at

        zero = Money.zero(self._currency)
        self._line_items: list[LineItem] = []
        self._totals = SaleTotals(subtotal=zero, discount=zero, tax_amount=zero, total=zero)
        self._refunded_amount = zero

        logger.info(
            "sale_created",
            extra={
                "sale_reference": self.reference,
                "pharmacist_id": pharmacist_id,
                "patient_id": patient_id,
                "currency": self.currency,
                "tax_rate": str(self.tax_rate),
            },
        )

    # -- derived figures -----------------------------------------------------

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return tuple(self._line_items)

    @property
    def subtotal(self) -> Money:
        return self._totals.subtotal

    @property
    def discount(self) -> Money:
        return self._totals.discount

    @property
    def tax_amount(self) -> Money:
        return self._totals.tax_amount

    @property
    def total(self) -> Money:
        return self._totals.total

    @property
    def refunded_amount(self) -> Money:
        return self._refunded_amount

    @property
    def refundable_amount(self) -> Money:
        """What is left to refund; zero unless completed or partially refunded."""
        if self.status not in (SaleStatus.COMPLETED, SaleStatus.PARTIALLY_REFUNDED):
            return Money.zero(self.currency)
        return self.total - self._refunded_amount

    @property
    def is_pending(self) -> bool:
        return self.status is SaleStatus.PENDING

    # -- line items ------------------------------------------------------------

    def add_line_item(
        self,
        item_id: Hashable,
        quantity: int,
        unit_price: Money,
    ) -> LineItem:
        """Append a line and recompute totals. Returns the new line."""
        self._require_pending("add_line_item")
        self._require_currency(unit_price)
        line = LineItem.create(item_id, quantity, unit_price)

        self._commit(self._line_items + [line], self.discount)
        logger.info(
            "sale_line_item_added",
            extra={
                "sale_reference": self.reference,
                "item_id": str(item_id),
                "quantity": quantity,
                "unit_price": str(unit_price),
                "line_total": str(line.line_total),
                "subtotal": str(self.subtotal),
            },
        )
        return line

    def remove_line_item(self, item_id: Hashable) -> bool:
        """
        Remove the first line for ``item_id``.

        Returns False when no line matches.  Removing the last line resets
        the discount to zero along with every other figure.

        Raises:
            NotModifiableError: if the sale is not pending.
            InvalidDiscountError: if the current discount would exceed the
                reduced subtotal.  Nothing is removed.
        """
        self._require_pending("remove_line_item")
        index = self._find_line(item_id)
        if index is None:
            return False

        remaining = self._line_items[:index] + self._line_items[index + 1:]
        self._commit(remaining, self.discount)
        logger.info(
            "sale_line_item_removed",
            extra={
                "sale_reference": self.reference,
                "item_id": str(item_id),
                "remaining_lines": len(remaining),
                "subtotal": str(self.subtotal),
            },
        )
        return True

    def update_line_item_quantity(self, item_id: Hashable, quantity: int) -> bool:
        """
        Change the quantity of the first line for ``item_id``.

        Returns False when no line matches.
        """
        self._require_pending("update_line_item_quantity")
        index = self._find_line(item_id)
        if index is None:
            return False

        current = self._line_items[index]
        updated = current.with_quantity(quantity)
        lines = list(self._line_items)
        lines[index] = updated
        self._commit(lines, self.discount)
        logger.info(
            "sale_line_item_quantity_updated",
            extra={
                "sale_reference": self.reference,
                "item_id": str(item_id),
                "previous_quantity": current.quantity,
                "new_quantity": quantity,
            },
        )
        return True

    # -- discounts -------------------------------------------------------------

    def apply_discount(self, amount: Money, reason: str | None = None) -> None:
        """
        Apply a fixed discount, replacing any earlier one.

        Raises:
            NotModifiableError: if the sale is not pending.
            CurrencyMismatchError: if ``amount`` is in another currency.
            InvalidDiscountError: if ``amount`` exceeds the subtotal.
        """
        self._require_pending("apply_discount")
        self._require_currency(amount)
        self._set_discount(amount)
        if reason:
            self.notes = f"Discount applied: {reason}"

    def apply_percentage_discount(
        self,
        percentage: Decimal | int | float | str,
        reason: str | None = None,
    ) -> Money:
        """
        Apply ``percentage`` (0-100) of the current subtotal as a fixed discount.

        The percentage is converted once; later line changes do not rescale
        the discount.  Returns the discount amount.
        """
        self._require_pending("apply_percentage_discount")
        amount = percentage_to_amount(self.subtotal, percentage)
        self._set_discount(amount)
        if reason:
            self.notes = f"Discount applied ({percentage}%): {reason}"
        return amount

    def apply_bulk_discount(self) -> bool:
        """Apply the configured bulk rate when the subtotal reaches the threshold."""
        self._require_pending("apply_bulk_discount")
        if not self._line_items or not qualifies_for_bulk_discount(
            self.subtotal, self._bulk_discount_threshold
        ):
            return False
        self._set_discount(self.subtotal * self._bulk_discount_rate)
        logger.info(
            "sale_bulk_discount_applied",
            extra={
                "sale_reference": self.reference,
                "bulk_discount_rate": str(self._bulk_discount_rate),
                "discount": str(self.discount),
            },
        )
        return True

    def remove_discount(self) -> None:
        self._require_pending("remove_discount")
        self._set_discount(Money.zero(self.currency))

    def recompute_totals(self) -> SaleTotals:
        """Re-derive subtotal, tax and total from the current lines and discount."""
        self._commit(self._line_items, self.discount)
        return self._totals

    # -- lifecycle -------------------------------------------------------------

    def complete(self) -> bool:
        """
        Finalize the sale.

        Returns False if the sale is not pending.

        Raises:
            EmptySaleError: if the sale has no line items.  Status stays pending.
        """
        transition = SALE_WORKFLOW.transition_for(self.status.value, "complete")
        if transition is None:
            logger.warning(
                "sale_complete_ignored",
                extra={"sale_reference": self.reference, "status": self.status.value},
            )
            return False
        if not self._line_items:
            logger.warning(
                "sale_complete_rejected_empty",
                extra={"sale_reference": self.reference},
            )
            raise EmptySaleError(self.reference)

        self._move_to(transition.to_state)
        return True

    def refund(self) -> bool:
        """Refund the whole sale. Returns False unless the sale is completed."""
        transition = SALE_WORKFLOW.transition_for(self.status.value, "refund")
        if transition is None:
            logger.warning(
                "sale_refund_ignored",
                extra={"sale_reference": self.reference, "status": self.status.value},
            )
            return False

        self._refunded_amount = self.total
        self._move_to(transition.to_state)
        return True

    def partial_refund(self, amount: Money) -> bool:
        """
        Refund part of a completed sale.

        Returns False unless the sale is completed or partially refunded.

        Raises:
            CurrencyMismatchError: if ``amount`` is in another currency.
            InvalidRefundError: if ``amount`` is zero or exceeds
                ``refundable_amount``.
        """
        transition = SALE_WORKFLOW.transition_for(self.status.value, "partial_refund")
        if transition is None:
            logger.warning(
                "sale_partial_refund_ignored",
                extra={"sale_reference": self.reference, "status": self.status.value},
            )
            return False

        self._require_currency(amount)
        refundable = self.refundable_amount
        if amount.is_zero or amount > refundable:
            logger.warning(
                "sale_partial_refund_rejected",
                extra={
                    "sale_reference": self.reference,
                    "amount": str(amount),
                    "refundable": str(refundable),
                },
            )
            raise InvalidRefundError(str(amount), str(refundable))

        self._refunded_amount = self._refunded_amount + amount
        self._move_to(transition.to_state)
        logger.info(
            "sale_partial_refund_recorded",
            extra={
                "sale_reference": self.reference,
                "amount": str(amount),
                "refunded_amount": str(self._refunded_amount),
            },
        )
        return True

    def cancel(self, reason: str) -> None:
        """
        Cancel a pending sale and record ``reason`` in the notes.

        Raises:
            InvalidStateTransitionError: if the sale is not pending.  A
                completed sale must be refunded instead.
        """
        transition = SALE_WORKFLOW.transition_for(self.status.value, "cancel")
        if transition is None:
            hint = "Use refund instead" if self.status is SaleStatus.COMPLETED else ""
            logger.warning(
                "sale_cancel_rejected",
                extra={"sale_reference": self.reference, "status": self.status.value},
            )
            raise InvalidStateTransitionError(
                self.reference, self.status.value, "cancel", hint
            )

        self.notes = f"Cancelled: {reason}"
        self._move_to(transition.to_state)

    # -- header ----------------------------------------------------------------

    def set_payment_method(self, method: PaymentMethod) -> None:
        self.payment_method = PaymentMethod(method)
        self._touch()

    def update_notes(self, notes: str | None) -> None:
        self.notes = notes
        self._touch()

    # -- internals -------------------------------------------------------------

    def _require_pending(self, action: str) -> None:
        if self.status is not SaleStatus.PENDING:
            logger.warning(
                "sale_modification_rejected",
                extra={
                    "sale_reference": self.reference,
                    "action": action,
                    "status": self.status.value,
                },
            )
            raise NotModifiableError(self.reference, self.status.value)

    def _require_currency(self, value: Money) -> None:
        if value.currency != self.currency:
            raise CurrencyMismatchError(self.currency, value.currency)

    def _find_line(self, item_id: Hashable) -> int | None:
        for index, line in enumerate(self._line_items):
            if line.item_id == item_id:
                return index
        return None

    def _set_discount(self, amount: Money) -> None:
        if amount > self.subtotal:
            logger.warning(
                "sale_discount_rejected",
                extra={
                    "sale_reference": self.reference,
                    "discount": str(amount),
                    "subtotal": str(self.subtotal),
                },
            )
            raise InvalidDiscountError(
                str(amount), str(self.subtotal), "Discount cannot exceed subtotal"
            )
        self._commit(self._line_items, amount)
        logger.info(
            "sale_discount_set",
            extra={
                "sale_reference": self.reference,
                "discount": str(self.discount),
                "tax_amount": str(self.tax_amount),
                "total": str(self.total),
            },
        )

    def _commit(self, lines: list[LineItem], discount: Money) -> None:
        # compute_totals raises before any field is assigned
        totals = compute_totals(lines, discount, self.tax_rate, self.currency)
        self._line_items = list(lines)
        self._totals = totals
        self._touch()

    def _move_to(self, state: str) -> None:
        previous = self.status
        self.status = SaleStatus(state)
        self._touch()
        with LogContext.bind(sale_reference=self.reference):
            logger.info(
                f"sale_{self.status.value}",
                extra={
                    "from_status": previous.value,
                    "to_status": self.status.value,
                    "total": str(self.total),
                },
            )

    def _touch(self) -> None:
        self.updated_at = self._clock.now()

    def __repr__(self) -> str:
        return (
            f"Sale(reference={self.reference!r}, status={self.status.value!r}, "
            f"lines={len(self._line_items)}, total={self.total!r})"
        )
