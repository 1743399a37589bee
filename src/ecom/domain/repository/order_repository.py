"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from ecom.domain.model.order import Order
from ecom.domain.repository.repository import Repository


class OrderRepository(Repository[Order]):
    """Marker interface so handlers can depend on an Order-specific port."""
