from decimal import Decimal, InvalidOperation

from storefront.models.product import Money, Shop

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_money(money: Money | None, without_trailing_zeros: bool = True) -> str:
    """Render a price like "$120" or "$119.50"."""
    if money is None:
        return ""
    try:
        amount = Decimal(money.amount)
    except InvalidOperation:
        return f"{money.amount} {money.currency_code}"

    if without_trailing_zeros and amount == amount.to_integral_value():
        text = f"{amount:,.0f}"
    else:
        text = f"{amount:,.2f}"

    symbol = CURRENCY_SYMBOLS.get(money.currency_code)
    if symbol is None:
        return f"{text} {money.currency_code}"
    return f"{symbol}{text}"


def variant_numeric_id(gid: str) -> str:
    """gid://shopify/ProductVariant/123 -> 123"""
    return gid.rsplit("/", 1)[-1]


def shop_pay_url(shop: Shop, variant_ids: list[str], quantity: int = 1) -> str | None:
    """Direct Shop Pay checkout link for the given variants."""
    if shop.primary_domain is None or not variant_ids:
        return None
    items = ",".join(f"{variant_numeric_id(gid)}:{quantity}" for gid in variant_ids)
    return f"{shop.primary_domain.url.rstrip('/')}/cart/{items}?payment=shop_pay"
