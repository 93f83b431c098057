from collections.abc import Iterable
from urllib.parse import urlencode

from storefront.models.product import Product, ProductOption, SelectedOption, Variant
from storefront.models.schemas import OptionChoice, OptionChoices


class NotOrderableError(Exception):
    """Raised when a product has no variant that could be put in a cart."""

    def __init__(self, handle: str):
        super().__init__(f"Product '{handle}' has no variants")
        self.handle = handle


def parse_selected_options(items: Iterable[tuple[str, str]]) -> list[SelectedOption]:
    """Turn query string pairs into the selection sent to the Storefront API.

    A repeated name keeps its first position but takes the last value seen.
    """
    selection: dict[str, str] = {}
    for name, value in items:
        selection[name] = value
    return [SelectedOption(name=name, value=value) for name, value in selection.items()]


def match_variant(product: Product, selection: list[SelectedOption]) -> Variant | None:
    """Find the variant whose options equal every known entry of the selection.

    Names that aren't options of the product are ignored. A selection that
    leaves more than one candidate (or none) doesn't match. Only the variants
    already on the product are searched; the product query fetches just the
    first one, so partial selections are left to the Storefront API.
    """
    option_names = {option.name for option in product.options}
    wanted = {s.name: s.value for s in selection if s.name in option_names}
    if not wanted:
        return None

    candidates = [
        variant
        for variant in product.variants
        if all(variant.option_value(name) == value for name, value in wanted.items())
    ]
    if len(candidates) != 1:
        return None
    return candidates[0]


def resolve_selected_variant(product: Product, selection: list[SelectedOption]) -> Variant:
    """Pick the variant the page shows and sells.

    The Storefront API's match wins; otherwise match locally against the
    variants we have, then fall back to the first variant so there's always
    something orderable.
    """
    if product.selected_variant is not None:
        return product.selected_variant

    matched = match_variant(product, selection)
    if matched is not None:
        return matched

    if not product.variants:
        raise NotOrderableError(product.handle)
    return product.variants[0]


def build_option_choices(
    path: str,
    options: list[ProductOption],
    selected_variant: Variant | None,
    selection: list[SelectedOption],
) -> list[OptionChoices]:
    """Links for the option picker, one per option value.

    Options missing from the query take the selected variant's value, so
    each link names a full variant and changes a single option.
    """
    current = {s.name: s.value for s in selection}
    if selected_variant is not None:
        for option in selected_variant.selected_options:
            current.setdefault(option.name, option.value)
    result = []
    for option in options:
        choices = []
        for value in option.values:
            params = dict(current)
            params[option.name] = value
            selected = (
                selected_variant is not None
                and selected_variant.option_value(option.name) == value
            )
            choices.append(
                OptionChoice(value=value, url=f"{path}?{urlencode(params)}", selected=selected)
            )
        result.append(OptionChoices(name=option.name, choices=choices))
    return result
