"""
Sales Workflows.

State machine for the sale lifecycle.
"""

from pharmacy_kernel.domain.workflow import Guard, Transition, Workflow
from pharmacy_kernel.logging_config import get_logger

logger = get_logger("modules.sales.workflows")


# -----------------------------------------------------------------------------
# Guards
# -----------------------------------------------------------------------------

HAS_LINE_ITEMS = Guard(
    name="has_line_items",
    description="Sale contains at least one line item",
)

REFUND_WITHIN_REMAINING = Guard(
    name="refund_within_remaining",
    description="Refund amount is positive and does not exceed the refundable amount",
)

logger.info(
    "sales_workflow_guards_defined",
    extra={
        "guards": [
            HAS_LINE_ITEMS.name,
            REFUND_WITHIN_REMAINING.name,
        ],
    },
)


# -----------------------------------------------------------------------------
# Sale Workflow
# -----------------------------------------------------------------------------

SALE_WORKFLOW = Workflow(
    name="sale",
    description="Sale pricing, completion and refund",
    initial_state="pending",
    states=(
        "pending",
        "completed",
        "refunded",
        "partially_refunded",
        "cancelled",
    ),
    transitions=(
        Transition("pending", "completed", action="complete", guard=HAS_LINE_ITEMS),
        Transition("pending", "cancelled", action="cancel"),
        Transition("completed", "refunded", action="refund"),
        Transition(
            "completed", "partially_refunded",
            action="partial_refund", guard=REFUND_WITHIN_REMAINING,
        ),
        Transition(
            "partially_refunded", "partially_refunded",
            action="partial_refund", guard=REFUND_WITHIN_REMAINING,
        ),
    ),
    terminal_states=("refunded", "cancelled"),
)

logger.info(
    "sales_workflow_defined",
    extra={
        "workflow": SALE_WORKFLOW.name,
        "states": list(SALE_WORKFLOW.states),
        "transition_count": len(SALE_WORKFLOW.transitions),
    },
)
