from purchases.services.purchase_service import TicketPurchaseService, build_purchase_service
from purchases.services.reservation_calculator import ReservationCalculator

__all__ = ["ReservationCalculator", "TicketPurchaseService", "build_purchase_service"]
