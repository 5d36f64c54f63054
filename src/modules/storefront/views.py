"""Product detail page view."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_safe

from modules.storefront.clients import get_product_client
from modules.storefront.page import ProductDetailPage


@require_safe
def product_detail(request: HttpRequest, slug: str) -> HttpResponse:
    """GET (or HEAD) /product/{slug}

    Always 200: a missing product is an error state of the page itself.
    """
    page = ProductDetailPage(client=get_product_client())
    page.activate(slug)
    return HttpResponse(page.render(request))
