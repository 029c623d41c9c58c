"""Use cases for discovering providers."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from harmonia.domain.entities import ProviderListing
from harmonia.infrastructure.repositories import ProviderProfileRepository


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def search_providers(
    session: Session,
    *,
    specialty: str | None = None,
    cultural_background: str | None = None,
    language: str | None = None,
    location: str | None = None,
) -> Sequence[ProviderListing]:
    """Return verified providers matching the supplied filters, best rated first."""

    return ProviderProfileRepository(session).search(
        specialty=_clean(specialty),
        cultural_background=_clean(cultural_background),
        language=_clean(language),
        location=_clean(location),
    )


__all__ = ["search_providers"]
