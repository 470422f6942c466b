from cinema_tickets.config.business_config import PurchaseLimits
from cinema_tickets.config.logger_config import configure_logging
from cinema_tickets.config.settings import TicketSettings

__all__ = [
    "PurchaseLimits",
    "TicketSettings",
    "configure_logging",
]
