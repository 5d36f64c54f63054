"""Product lookup exceptions.

Raised by the Service Layer.  The API layer (Views) catches these and
translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No servable product matches the slug.

    Raised both when the slug is unknown and when the product exists but
    is hidden (``is_visible = False``); callers cannot tell them apart.
    """


class ProductLookupFailed(Exception):
    """The catalog store failed while resolving a product.

    The message is generic; the underlying fault is chained as
    ``__cause__`` and logged, never shown to clients.
    """
