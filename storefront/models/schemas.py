from pydantic import BaseModel, ConfigDict, Field

from storefront.models.product import Product, Shop, Variant


# --- Product page schemas ---

class ProductPageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    shop: Shop
    product: Product
    selected_variant: Variant | None = Field(default=None, alias="selectedVariant")
    orderable: bool = True


class OptionChoice(BaseModel):
    value: str
    url: str
    selected: bool = False


class OptionChoices(BaseModel):
    name: str
    choices: list[OptionChoice]


class ManufacturerInfo(BaseModel):
    name: str | None = None
    description: str | None = None


# --- Cart schemas ---

class CartLine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    merchandise_id: str = Field(alias="merchandiseId")
    quantity: int = 1
