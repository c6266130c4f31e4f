from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from apps.productapi.config.constants import NUMERIC_FIELDS, ProductStatus, ProductType, StockStatus


class CategoryRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = Field(default=None, description="ID of an existing catalog category")
    name: str | None = Field(default=None, description="Display name of the category")


class ImageRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int | None = None
    src: str | None = None
    name: str | None = None
    alt: str | None = None


class Seo(BaseModel):
    title: str | None = Field(default=None, description="SEO optimized title")
    description: str | None = Field(
        default=None,
        description="""
            Meta description for search results.
            Should be 150-160 characters.
        """,
    )
    keywords: str | None = Field(default=None, description="Comma separated keywords")
    focus_keyword: str | None = Field(default=None, description="Main product keyword")

    @field_validator("keywords", mode="before")
    @classmethod
    def join_keywords(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ", ".join(str(keyword).strip() for keyword in value if str(keyword).strip())
        return value


class ProductDraft(BaseModel):
    """A candidate product, authored by an operator or generated by the model.

    ``name`` and ``regular_price`` are only enforced when the draft is
    submitted, so an incomplete draft can still be held, edited and skipped.
    """

    name: str | None = Field(default=None, description="Name of the product")
    regular_price: str | None = Field(default=None, description="Regular price as a decimal string, e.g. 29.99")
    sale_price: str | None = Field(default=None, description="Discounted price as a decimal string")
    sku: str | None = Field(default=None, description="Unique and meaningful stock keeping unit")
    description: str | None = Field(default=None, description="Detailed HTML product description")
    short_description: str | None = Field(default=None, description="Brief product summary")
    weight: str | None = None
    length: str | None = None
    width: str | None = None
    height: str | None = None
    manage_stock: bool | None = None
    stock_quantity: int | None = Field(default=None, ge=0)
    stock_status: StockStatus | None = None
    type: ProductType = ProductType.SIMPLE
    status: ProductStatus = ProductStatus.PUBLISH
    categories: list[CategoryRef] | None = None
    images: list[ImageRef] | None = None
    seo: Seo | None = None

    @field_validator(*NUMERIC_FIELDS, "sku", mode="before")
    @classmethod
    def numbers_to_strings(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, int | float):
            return str(value)
        return value

    @field_validator("categories", mode="before")
    @classmethod
    def category_names_to_refs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value


class Dimensions(BaseModel):
    length: str | None = None
    width: str | None = None
    height: str | None = None


class MetaData(BaseModel):
    key: str
    value: str


class ExternalProductPayload(BaseModel):
    """Product body in the shape the WooCommerce products endpoint accepts.

    ``None`` means the field is absent and it is left out of ``to_payload``.
    """

    name: str
    type: ProductType
    regular_price: str
    sale_price: str | None = None
    description: str | None = None
    short_description: str | None = None
    sku: str | None = None
    weight: str | None = None
    dimensions: Dimensions | None = None
    manage_stock: bool | None = None
    stock_quantity: int | None = None
    stock_status: StockStatus | None = None
    categories: list[CategoryRef] | None = None
    images: list[ImageRef] | None = None
    status: ProductStatus
    meta_data: list[MetaData] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
