"""Payload handler - handles payload concerns only.

Handlers:
- Parse payloads and validate input format
- Call services for business logic
- Map domain errors to error data
- Never contain business logic
- Never swallow gateway failures
"""

from typing import Any

from purchases.domain.errors import DomainError
from purchases.handlers.serializers import (
    DomainErrorSerializer,
    PurchaseRequestSerializer,
    ReservationSerializer,
)
from purchases.services.purchase_service import TicketPurchaseService

INVALID_PAYLOAD = "INVALID_PAYLOAD"


def handle_purchase(
    payload: dict[str, Any], service: TicketPurchaseService
) -> tuple[bool, dict[str, Any]]:
    """Run a purchase described by ``payload``.

    Returns ``(True, reservation_data)`` on success and
    ``(False, error_data)`` when the payload is malformed or a purchase rule
    rejects it.
    """
    serializer = PurchaseRequestSerializer(data=payload)
    if not serializer.is_valid():
        return False, {
            "code": INVALID_PAYLOAD,
            "message": "Malformed purchase payload",
            "errors": serializer.errors,
        }

    try:
        reservation = service.purchase_tickets(
            serializer.validated_data["account_id"],
            *serializer.to_ticket_requests(),
        )
    except DomainError as exc:
        return False, dict(DomainErrorSerializer(exc).data)

    return True, dict(ReservationSerializer(reservation).data)
