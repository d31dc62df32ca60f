from purchases.handlers.purchase_handler import handle_purchase

__all__ = ["handle_purchase"]
