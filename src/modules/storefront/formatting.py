"""Price formatting for the product detail page.

Prices are shown in Indonesian Rupiah with no fraction digits, e.g.
``Rp 150.000`` (a non-breaking space follows the symbol).

``PRICE_TIERS`` is the rendering rule table: a tier without a price is
left out of the price block, except the general tier, which falls back
to the "contact us" label.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, List, Optional, Union

from django.utils import numberformat

from modules.storefront.constants import (
    CONTACT_LABEL,
    CURRENCY_SYMBOL,
    DECIMAL_SEPARATOR,
    THOUSAND_SEPARATOR,
)

Amount = Union[Decimal, int, float, None]


def _whole_rupiah(price: Amount) -> Optional[Decimal]:
    if price is None:
        return None
    return Decimal(str(price)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def has_price(price: Amount) -> bool:
    """A price that rounds to zero counts as "no price", like a missing one."""
    return bool(_whole_rupiah(price))


def format_price(price: Amount) -> str:
    amount = _whole_rupiah(price)
    if not amount:
        return CONTACT_LABEL
    digits = numberformat.format(
        amount,
        DECIMAL_SEPARATOR,
        decimal_pos=0,
        grouping=3,
        thousand_sep=THOUSAND_SEPARATOR,
        force_grouping=True,
    )
    return f"{CURRENCY_SYMBOL}\u00a0{digits}"


@dataclass(frozen=True)
class PriceTier:
    field: str
    label: str
    fallback: Optional[str] = None
    primary: bool = False


@dataclass(frozen=True)
class PriceRow:
    label: str
    value: str
    primary: bool


PRICE_TIERS = (
    PriceTier("general_price", "Harga Umum", fallback=CONTACT_LABEL, primary=True),
    PriceTier("consultant_price", "Harga Consultant"),
    PriceTier("supervisor_price", "Harga Supervisor"),
    PriceTier("manager_price", "Harga Manager"),
    PriceTier("director_price", "Harga Director"),
)


def price_rows(product: Any) -> List[PriceRow]:
    """Rows of the price block, in display order."""
    rows = []
    for tier in PRICE_TIERS:
        price = getattr(product, tier.field)
        if has_price(price):
            value = format_price(price)
        elif tier.fallback is not None:
            value = tier.fallback
        else:
            continue
        rows.append(PriceRow(tier.label, value, tier.primary))
    return rows
