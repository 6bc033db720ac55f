"""Abstract repository for stored invoice requests.

A stored request is the same payload a client would POST (customer plus
cart), kept under a name so an invoice can be regenerated on demand.
Defined in the domain layer so the domain never depends on
infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class InvoiceRequestRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Any | None:
        """Return the decoded request payload stored as *name*, or None."""

    @abstractmethod
    def list_names(self) -> list[str]:
        """Return the names of every stored request, sorted."""
