"""
InvoiceDesk Services Layer

- Models: Pure data + constraints (no business logic)
- Services: Parameterized SQL for every write
- Actions: Validation + persistence + cache invalidation + navigation
- Views: Request parsing and response mapping
- Templates: Presentation only
"""

from .invoice_service import InvoiceService
from .user_service import UserService

__all__ = [
    "InvoiceService",
    "UserService",
]
