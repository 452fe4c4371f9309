"""
Front Desk Core Config — Public API
=====================================
Admin-configurable thresholds (lockout, late checkout, deposit).
"""

from core.config.frontdesk import CENT, MAX_MONEY, FrontDeskConfig, to_money

__all__ = [
    "CENT",
    "MAX_MONEY",
    "FrontDeskConfig",
    "to_money",
]
