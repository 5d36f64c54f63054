"""Clients the product page uses to reach the lookup endpoint.

Both return the same ``ProductEnvelope`` the endpoint serves:

- ``HttpProductClient`` calls ``GET {base}/api/products/{slug}`` with
  ``requests``.  The envelope is read whatever the status code; only a
  network error or an unreadable body is a ``TransportFailure``.
  There are no retries and no timeout unless one is configured.
- ``LocalProductClient`` runs the same look-up in-process, for
  deployments where the page and the endpoint share one server.
"""

from __future__ import annotations

from typing import Optional, Protocol
from urllib.parse import quote

import requests
import structlog
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import ValidationError
from requests import RequestException

from modules.products.dtos import ProductEnvelope
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.views import lookup_product
from modules.storefront.exceptions import TransportFailure

logger = structlog.get_logger(__name__)


class ProductClient(Protocol):
    def fetch_product(self, slug: str) -> ProductEnvelope: ...


class HttpProductClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.STOREFRONT_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.STOREFRONT_API_TIMEOUT
        self._session = session or requests.Session()

    def fetch_product(self, slug: str) -> ProductEnvelope:
        url = f"{self.base_url}/api/products/{quote(slug, safe='')}"
        logger.info("storefront.fetch_product", url=url)

        try:
            resp = self._session.get(url, timeout=self.timeout)
            payload = resp.json()
        except (RequestException, ValueError) as exc:
            logger.warning("storefront.fetch_failed", url=url, error=str(exc))
            raise TransportFailure(f"GET {url} failed") from exc

        try:
            return ProductEnvelope.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "storefront.malformed_envelope",
                url=url,
                status_code=resp.status_code,
            )
            raise TransportFailure(f"GET {url} returned a malformed envelope") from exc


class LocalProductClient:
    def __init__(self, service: Optional[ProductService] = None) -> None:
        self._service = service or ProductService(repository=ProductDjangoRepository())

    def fetch_product(self, slug: str) -> ProductEnvelope:
        body, _ = lookup_product(self._service, slug)
        return ProductEnvelope.model_validate(body)


def get_product_client() -> ProductClient:
    """Client selected by ``STOREFRONT_PRODUCT_CLIENT``."""
    kind = settings.STOREFRONT_PRODUCT_CLIENT
    if kind == "http":
        return HttpProductClient()
    if kind == "local":
        return LocalProductClient()
    raise ImproperlyConfigured(
        f"STOREFRONT_PRODUCT_CLIENT must be 'local' or 'http', got {kind!r}."
    )
