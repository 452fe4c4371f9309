"""
Front Desk Hotel Booking Engine — Company Profile
===================================================
The single active company profile printed on receipts and reports.
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction

from core.errors import NotFoundError, ValidationError
from engines.hotel_booking.models import Company

logger = logging.getLogger("frontdesk.bookings")


def get_active_company() -> Optional[Company]:
    return Company.objects.filter(active=True).order_by("id").first()


def update_company(
    *,
    name: Optional[str] = None,
    street_address: Optional[str] = None,
    contact_no: Optional[str] = None,
    currency_symbol: Optional[str] = None,
) -> Company:
    """Partial update of the active profile; None leaves a field unchanged."""
    if name is not None and not name.strip():
        raise ValidationError("name must be non-empty.")
    if currency_symbol is not None and not currency_symbol.strip():
        raise ValidationError("currency_symbol must be non-empty.")

    changes = {
        field_name: value.strip()
        for field_name, value in (
            ("name", name),
            ("street_address", street_address),
            ("contact_no", contact_no),
            ("currency_symbol", currency_symbol),
        )
        if value is not None
    }

    with transaction.atomic():
        company = (
            Company.objects.select_for_update()
            .filter(active=True)
            .order_by("id")
            .first()
        )
        if company is None:
            raise NotFoundError("No active company profile")
        for field_name, value in changes.items():
            setattr(company, field_name, value)
        if changes:
            company.save(update_fields=list(changes))

    logger.info(f"Company profile {company.pk} updated: {sorted(changes)}")
    return company
