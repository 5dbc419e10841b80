"""Display helpers for bilingual text and prices (en / bs)."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from app.domain.enums import Locale, PricingType

if TYPE_CHECKING:
    from app.domain.value_objects.core import I18nText

_CURRENCY_SYMBOLS: dict[str, str] = {"EUR": "€", "USD": "$", "BAM": "KM"}


def get_localized_text(text: I18nText | None, locale: Locale | str = Locale.EN) -> str:
    """Return text in locale, falling back to English, then ''."""
    if text is None:
        return ""
    return text.get(locale)


def _format_amount(amount: float, locale: Locale) -> str:
    """Up to two decimals, no trailing zeros; bs uses ',' as decimal separator."""
    quantized = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if quantized == quantized.to_integral_value():
        text = f"{int(quantized):,}"
    else:
        text = f"{quantized:,.2f}"
    if locale == Locale.BS:
        text = text.replace(",", " ").replace(".", ",")
    return text


def format_price(
    price: float | None,
    currency: str = "EUR",
    locale: Locale | str = Locale.EN,
) -> str:
    """Format a price for display ('€25', '25 €' in bs). Empty string when price is None."""
    if price is None:
        return ""
    locale = Locale(locale)
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    amount = _format_amount(price, locale)
    if locale == Locale.BS:
        return f"{amount} {symbol}"
    return f"{symbol}{amount}"


def get_pricing_display(
    pricing_type: PricingType | str,
    price: float | None,
    currency: str = "EUR",
    locale: Locale | str = Locale.EN,
) -> str:
    """Guest-facing price label for a service.

    free -> Free / Besplatno; quote -> Request Quote / Na upit;
    variable -> 'From €X' or 'Price varies'; fixed -> formatted price.
    """
    locale = Locale(locale)
    bs = locale == Locale.BS
    pricing_type = PricingType(pricing_type)
    if pricing_type == PricingType.FREE:
        return "Besplatno" if bs else "Free"
    if pricing_type == PricingType.QUOTE:
        return "Na upit" if bs else "Request Quote"
    if pricing_type == PricingType.VARIABLE:
        if price:
            return f"{'Od' if bs else 'From'} {format_price(price, currency, locale)}"
        return "Cijena varira" if bs else "Price varies"
    return format_price(price, currency, locale) if price else ""


def slugify(text: str) -> str:
    """Lowercase, drop punctuation, collapse whitespace/underscores into '-'."""
    value = re.sub(r"[^\w\s-]", "", text.strip().lower())
    value = re.sub(r"[\s_-]+", "-", value)
    return value.strip("-")
