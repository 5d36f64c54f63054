"""Page states of the product detail view.

The page is always in exactly one of three states::

    Loading ──fetch──▶ Loaded(product)
                 └───▶ Error(message)

``transition`` is the single place that maps a fetch outcome (an
envelope or a ``TransportFailure``) to the next state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from modules.products.dtos import ProductDetailDTO, ProductEnvelope
from modules.storefront.constants import DEFAULT_ERROR_MESSAGE, TRANSPORT_ERROR_MESSAGE
from modules.storefront.exceptions import TransportFailure


@dataclass(frozen=True)
class Loading:
    slug: Optional[str] = None

    name = "loading"


@dataclass(frozen=True)
class Loaded:
    product: ProductDetailDTO

    name = "loaded"


@dataclass(frozen=True)
class Error:
    message: str

    name = "error"


PageState = Union[Loading, Loaded, Error]

FetchOutcome = Union[ProductEnvelope, TransportFailure]


def transition(outcome: FetchOutcome) -> PageState:
    """Resolve a finished fetch into ``Loaded`` or ``Error``."""
    if isinstance(outcome, TransportFailure):
        return Error(TRANSPORT_ERROR_MESSAGE)
    if outcome.success and outcome.data is not None:
        return Loaded(outcome.data)
    return Error(outcome.error or DEFAULT_ERROR_MESSAGE)
