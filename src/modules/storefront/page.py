"""Product detail page controller.

``ProductDetailPage`` holds the per-page state (``Loading`` /
``Loaded`` / ``Error`` plus the image fallback latch) and renders it.
The product client and the link opener are injected so the page can be
driven without a browser or a live endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.conf import settings
from django.http import HttpRequest
from django.template.loader import render_to_string

from modules.storefront import constants
from modules.storefront.exceptions import TransportFailure
from modules.storefront.formatting import price_rows
from modules.storefront.links import (
    NEW_BROWSING_CONTEXT,
    whatsapp_contact_url,
    whatsapp_order_url,
)
from modules.storefront.states import Error, Loaded, Loading, PageState, transition

if TYPE_CHECKING:
    from modules.products.dtos import ProductDetailDTO
    from modules.storefront.clients import ProductClient
    from modules.storefront.links import LinkOpener

logger = structlog.get_logger(__name__)


class ProductDetailPage:
    template_name = "storefront/product_detail.html"

    def __init__(
        self, client: ProductClient, opener: Optional[LinkOpener] = None
    ) -> None:
        self._client = client
        self._opener = opener
        self.slug: Optional[str] = None
        self.state: PageState = Loading()
        self.image_error = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self, slug: str) -> PageState:
        """Show ``slug``: reset to ``Loading``, fetch once, resolve.

        Every call fetches again, even for the slug already shown.  Whatever
        the client raises ends the fetch in ``Error``.
        """
        self.slug = slug
        self.state = Loading(slug)
        self.image_error = False

        log = logger.bind(slug=slug)
        try:
            outcome = self._client.fetch_product(slug)
        except TransportFailure as exc:
            log.error("storefront.fetch_product_failed", error=str(exc))
            outcome = exc
        except Exception as exc:
            log.exception("storefront.fetch_product_crashed")
            outcome = TransportFailure(str(exc))

        self.state = transition(outcome)
        log.info("storefront.page_resolved", state=self.state.name)
        return self.state

    def mark_image_failed(self) -> None:
        """Latch the image placeholder until the next ``activate``."""
        self.image_error = True

    # ------------------------------------------------------------------
    # Derived view data
    # ------------------------------------------------------------------

    @property
    def product(self) -> Optional[ProductDetailDTO]:
        if isinstance(self.state, Loaded):
            return self.state.product
        return None

    @property
    def show_image(self) -> bool:
        product = self.product
        return bool(product and product.image) and not self.image_error

    def buy_now(self) -> str:
        """Open the WhatsApp order link in a new browsing context."""
        product = self.product
        if product is None:
            raise RuntimeError("buy_now requires a loaded product.")
        url = whatsapp_order_url(product.name)
        if self._opener is not None:
            self._opener.open(url, NEW_BROWSING_CONTEXT)
        logger.info("storefront.buy_now", slug=product.slug)
        return url

    def get_context_data(self) -> Dict[str, Any]:
        product = self.product
        context: Dict[str, Any] = {
            "state": self.state.name,
            "home_url": settings.STOREFRONT_HOME_URL,
            "listing_url": settings.STOREFRONT_LISTING_URL,
            "store": {
                "name": constants.STORE_NAME,
                "address": constants.STORE_ADDRESS,
                "email": constants.STORE_EMAIL,
                "phone": constants.STORE_PHONE,
            },
        }
        if isinstance(self.state, Error):
            context["error_message"] = self.state.message
        if product is not None:
            context.update(
                product=product,
                show_image=self.show_image,
                price_rows=price_rows(product),
                order_url=whatsapp_order_url(product.name),
                contact_url=whatsapp_contact_url(),
            )
        return context

    def render(self, request: Optional[HttpRequest] = None) -> str:
        return render_to_string(
            self.template_name, self.get_context_data(), request=request
        )
