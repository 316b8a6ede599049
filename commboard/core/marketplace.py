"""
CommBoard Marketplace

Buy, sell and rent postings with text search and category filtering.
"""

import logging
from typing import Optional

from ..db.models import Category, Posting
from .collection import CollectionService
from .store import POSTINGS_KEY
from .views import ALL_CATEGORIES, count_by_category, filter_postings

logger = logging.getLogger(__name__)


def default_postings() -> list[Posting]:
    """Demonstration postings shown on a fresh board."""
    return [Posting.from_dict(data) for data in (
        {
            "id": "1",
            "title": "Bike - Excellent Condition",
            "description": (
                "Selling my bike as I'm moving to a new city. Great for trails and city "
                "riding. Well maintained with recent tune-up."
            ),
            "category": "sell",
            "price": "Rs.35000",
            "contact": "seller@community.example",
            "author": "Amit Tiwari",
            "createdAt": "2025-01-14T12:00:00Z",
        },
        {
            "id": "2",
            "title": "Looking for Study Table",
            "description": (
                "Need a sturdy study table for my home office. Preferably with drawers. "
                "Good condition required."
            ),
            "category": "buy",
            "contact": "9589874521",
            "author": "Vinayak",
            "createdAt": "2024-01-13T15:30:00Z",
        },
        {
            "id": "3",
            "title": "2BHK Apartment Available",
            "description": (
                "Spacious 2-bedroom apartment available for rent. Includes parking spot "
                "and access to community amenities."
            ),
            "category": "rent",
            "price": "Rs.12000/month",
            "contact": "rentals@community.example",
            "author": "Property Manager",
            "createdAt": "2024-01-12T09:15:00Z",
        },
    )]


class MarketplaceService(CollectionService):
    """Community marketplace."""

    key = POSTINGS_KEY
    noun = "posting"

    def default_records(self) -> list[Posting]:
        return default_postings()

    def list_postings(self) -> list[Posting]:
        return self._records()

    def search(self, term: str = "", category: str = ALL_CATEGORIES) -> list[Posting]:
        """Postings whose title/description contain term, in category."""
        return filter_postings(self._records(), term, category)

    def category_counts(self) -> dict[str, int]:
        return count_by_category(self._records())

    def create(
        self,
        title: str,
        description: str,
        category: str,
        contact: str,
        price: Optional[str] = None
    ) -> tuple[Optional[Posting], str]:
        """
        Publish a posting as the logged-in user.

        An empty price is stored as no price.

        Returns:
            (Posting, "") on success
            (None, error_message) on failure
        """
        error = self._check_author() or self._check_required(
            title=title,
            description=description,
            contact=contact,
        )
        if error:
            return None, error

        try:
            kind = Category(category)
        except ValueError:
            return None, f"Category must be one of: {', '.join(c.value for c in Category)}."

        posting = Posting(
            id=self._new_id(),
            title=title.strip(),
            description=description.strip(),
            category=kind,
            contact=contact.strip(),
            author=self.session.current.name,
            created_at=self.clock.now(),
            price=price.strip() if price and price.strip() else None,
        )
        self._prepend(posting)
        return posting, ""
