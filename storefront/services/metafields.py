from storefront.models.product import Metafield
from storefront.models.schemas import ManufacturerInfo

ADDITIONAL_FEATURES_KEY = "additional_features"
MANUFACTURER_INFO_KEY = "manufacturer_info"


def find_metafield(metafields: list[Metafield | None], key: str) -> Metafield | None:
    """Return the first metafield with the given key, or None if absent."""
    for metafield in metafields:
        if metafield is not None and metafield.key == key:
            return metafield
    return None


def reference_field(metafield: Metafield | None, key: str) -> str | None:
    """Value of a sub-field on the metafield's metaobject reference, if any."""
    if metafield is None or metafield.reference is None:
        return None
    for field in metafield.reference.fields:
        if field is not None and field.key == key:
            return field.value
    return None


def additional_features(metafields: list[Metafield | None]) -> str | None:
    metafield = find_metafield(metafields, ADDITIONAL_FEATURES_KEY)
    return metafield.value if metafield else None


def manufacturer_info(metafields: list[Metafield | None]) -> ManufacturerInfo | None:
    """Name and description of the manufacturer metaobject.

    Returns None when the metafield or its reference is missing; a missing
    sub-field only blanks out that line.
    """
    metafield = find_metafield(metafields, MANUFACTURER_INFO_KEY)
    if metafield is None or metafield.reference is None:
        return None
    return ManufacturerInfo(
        name=reference_field(metafield, "name"),
        description=reference_field(metafield, "description"),
    )
