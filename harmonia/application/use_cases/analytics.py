"""Dashboard figures for providers."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from harmonia.domain.entities import MonthlyCount, ProviderAnalytics
from harmonia.infrastructure.repositories import (
    AppointmentRepository,
    ProviderReviewRepository,
)
from harmonia.utils import ensure_app_timezone, now_in_app_timezone

from .profiles import get_provider_profile

ANALYTICS_MONTHS = 12


def _month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def _trailing_months(reference: datetime, months: int) -> list[tuple[int, int]]:
    year, month = reference.year, reference.month
    keys: list[tuple[int, int]] = []
    for _ in range(months):
        keys.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    keys.reverse()
    return keys


def get_provider_analytics(
    session: Session, *, user_id: str, reference: datetime | None = None
) -> ProviderAnalytics:
    """Summarise the caller's practice over the trailing twelve months.

    Every month in the window is present in ``monthly_appointments``, oldest
    first, including months without appointments.
    """

    provider = get_provider_profile(session, user_id)
    reference = ensure_app_timezone(reference) if reference else now_in_app_timezone()
    months = _trailing_months(reference, ANALYTICS_MONTHS)
    first_year, first_month = months[0]
    window_start = reference.replace(
        year=first_year, month=first_month, day=1, hour=0, minute=0, second=0, microsecond=0
    )

    appointments = AppointmentRepository(session)
    counts = Counter(
        _month_key(value.year, value.month)
        for value in appointments.list_dates_for_provider(provider.id, since=window_start)
        if value <= reference
    )
    average, review_count = ProviderReviewRepository(session).rating_summary(provider.id)

    return ProviderAnalytics(
        total_patients=appointments.count_distinct_patients(provider.id),
        total_appointments=appointments.count_for_provider(provider.id),
        avg_rating=average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
        review_count=review_count,
        monthly_appointments=[
            MonthlyCount(month=key, count=counts.get(key, 0))
            for key in (_month_key(year, month) for year, month in months)
        ],
    )


__all__ = ["ANALYTICS_MONTHS", "get_provider_analytics"]
