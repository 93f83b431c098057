from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorefrontModel(BaseModel):
    """Base for models parsed straight out of Storefront API responses."""

    model_config = ConfigDict(populate_by_name=True)


# --- Shared value types ---

class Money(StorefrontModel):
    amount: str
    currency_code: str = Field(alias="currencyCode")


class Image(StorefrontModel):
    id: str | None = None
    url: str
    alt_text: str | None = Field(default=None, alias="altText")
    width: int | None = None
    height: int | None = None


class SelectedOption(StorefrontModel):
    name: str
    value: str


# --- Product options ---

class OptionValue(StorefrontModel):
    name: str


class ProductOption(StorefrontModel):
    name: str
    option_values: list[OptionValue] = Field(default_factory=list, alias="optionValues")

    @property
    def values(self) -> list[str]:
        return [v.name for v in self.option_values]


# --- Variants ---

class VariantProduct(StorefrontModel):
    title: str
    handle: str


class Variant(StorefrontModel):
    id: str
    title: str = ""
    available_for_sale: bool = Field(default=False, alias="availableForSale")
    price: Money
    compare_at_price: Money | None = Field(default=None, alias="compareAtPrice")
    unit_price: Money | None = Field(default=None, alias="unitPrice")
    sku: str | None = None
    image: Image | None = None
    selected_options: list[SelectedOption] = Field(default_factory=list, alias="selectedOptions")
    product: VariantProduct | None = None

    def option_value(self, name: str) -> str | None:
        for option in self.selected_options:
            if option.name == name:
                return option.value
        return None


# --- Metafields ---

class MetaobjectField(StorefrontModel):
    key: str
    value: str | None = None
    type: str | None = None


class Metaobject(StorefrontModel):
    # References that are not metaobjects come back as an empty object.
    id: str | None = None
    handle: str | None = None
    fields: list[MetaobjectField | None] = Field(default_factory=list)


class Metafield(StorefrontModel):
    key: str
    value: str | None = None
    type: str | None = None
    reference: Metaobject | None = None


# --- Product & shop ---

class Product(StorefrontModel):
    id: str
    handle: str
    title: str
    vendor: str = ""
    description: str = ""
    description_html: str = Field(default="", alias="descriptionHtml")
    featured_image: Image | None = Field(default=None, alias="featuredImage")
    options: list[ProductOption] = Field(default_factory=list)
    metafields: list[Metafield] = Field(default_factory=list)
    selected_variant: Variant | None = Field(default=None, alias="selectedVariant")
    variants: list[Variant] = Field(default_factory=list)

    @field_validator("metafields", mode="before")
    @classmethod
    def _drop_missing_metafields(cls, value):
        # Identifiers that don't resolve come back as null entries
        if value is None:
            return []
        return [mf for mf in value if mf is not None]

    @field_validator("variants", mode="before")
    @classmethod
    def _unwrap_variant_nodes(cls, value):
        if value is None:
            return []
        if isinstance(value, dict):
            return value.get("nodes") or []
        return value


class Domain(StorefrontModel):
    url: str


class Shop(StorefrontModel):
    primary_domain: Domain | None = Field(default=None, alias="primaryDomain")


class Cart(StorefrontModel):
    id: str
    checkout_url: str | None = Field(default=None, alias="checkoutUrl")
    total_quantity: int = Field(default=0, alias="totalQuantity")
