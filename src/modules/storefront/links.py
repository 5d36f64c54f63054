"""Outbound WhatsApp links."""

from __future__ import annotations

from typing import Protocol
from urllib.parse import quote

from modules.storefront.constants import ORDER_MESSAGE_TEMPLATE, WHATSAPP_BASE_URL

NEW_BROWSING_CONTEXT = "_blank"

# Characters JavaScript's encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class LinkOpener(Protocol):
    def open(self, url: str, target: str) -> None: ...


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def whatsapp_order_url(product_name: str) -> str:
    """Deep link with the order message for ``product_name`` pre-filled."""
    message = ORDER_MESSAGE_TEMPLATE.format(name=product_name)
    return f"{WHATSAPP_BASE_URL}?text={encode_uri_component(message)}"


def whatsapp_contact_url() -> str:
    """Plain chat link used by the consultation call-to-action."""
    return WHATSAPP_BASE_URL
