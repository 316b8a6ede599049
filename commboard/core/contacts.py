"""
CommBoard Contacts

Directory of important community contacts.
"""

import logging
from typing import Optional

from ..db.models import Contact
from .collection import CollectionService
from .store import CONTACTS_KEY
from .views import count_matching

logger = logging.getLogger(__name__)


class ContactService(CollectionService):
    """Important contacts. Starts empty."""

    key = CONTACTS_KEY
    noun = "contact"

    def list_contacts(self) -> list[Contact]:
        return self._records()

    def by_department(self, department: str) -> list[Contact]:
        """Contacts in department, ignoring case."""
        target = department.lower()
        return [c for c in self._records() if c.department.lower() == target]

    def department_count(self, department: str) -> int:
        return count_matching(self._records(), "department", department)

    def create(
        self,
        name: str,
        role: str,
        phone: str,
        department: str,
        email: Optional[str] = None,
        availability: Optional[str] = None
    ) -> tuple[Optional[Contact], str]:
        """
        Add a contact.

        Returns:
            (Contact, "") on success
            (None, error_message) on failure
        """
        error = self._check_author() or self._check_required(
            name=name,
            role=role,
            phone=phone,
            department=department,
        )
        if error:
            return None, error

        contact = Contact(
            id=self._new_id(),
            name=name.strip(),
            role=role.strip(),
            phone=phone.strip(),
            department=department.strip(),
            email=email.strip() if email and email.strip() else None,
            availability=availability.strip() if availability and availability.strip() else None,
        )
        self._prepend(contact)
        return contact, ""
