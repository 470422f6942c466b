"""Runtime settings, read from the environment or a .env file."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinema_tickets.domain import PriceTable, TicketCategory


LogLevel = Literal['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']


class TicketSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='CINEMA_TICKETS_',
        env_file='.env',
        env_ignore_empty=True,
        extra='ignore',
    )

    # Unit prices
    INFANT_PRICE: int = Field(default=0, ge=0)
    CHILD_PRICE: int = Field(default=10, ge=0)
    ADULT_PRICE: int = Field(default=20, ge=0)

    # Logging
    LOG_LEVEL: LogLevel = 'INFO'

    def price_table(self) -> PriceTable:
        return PriceTable.from_mapping(
            {
                TicketCategory.INFANT: self.INFANT_PRICE,
                TicketCategory.CHILD: self.CHILD_PRICE,
                TicketCategory.ADULT: self.ADULT_PRICE,
            }
        )
