"""
Address value object.

Tables that carry an address (``member``, ``delivery``) store it as three
plain columns; this model is the value those columns are read into and
written from.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Address(Base):
    """Postal address embedded in members and deliveries."""

    city: Optional[str] = Field(default=None, max_length=100)
    street: Optional[str] = Field(default=None, max_length=200)
    zipcode: Optional[str] = Field(default=None, max_length=20)


class AddressColumns(Address):
    """Mixin declaring the three address columns on a table model."""

    @property
    def address(self) -> Address:
        return Address(city=self.city, street=self.street, zipcode=self.zipcode)

    def set_address(self, address: Optional[Address]) -> None:
        """Copy ``address`` into the columns; ``None`` clears them."""
        address = address or Address()
        self.city = address.city
        self.street = address.street
        self.zipcode = address.zipcode
