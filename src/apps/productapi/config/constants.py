from enum import Enum


class WooCommerceEndpoint(Enum):
    PRODUCTS = "/products"
    CATEGORIES = "/products/categories"


class ProductType(str, Enum):
    SIMPLE = "simple"
    GROUPED = "grouped"
    EXTERNAL = "external"
    VARIABLE = "variable"


class ProductStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    PUBLISH = "publish"


class StockStatus(str, Enum):
    IN_STOCK = "instock"
    OUT_OF_STOCK = "outofstock"
    ON_BACKORDER = "onbackorder"


# Rank Math meta keys, in the order they are written to meta_data
SEO_META_KEYS: list[tuple[str, str]] = [
    ("title", "rank_math_title"),
    ("description", "rank_math_description"),
    ("focus_keyword", "rank_math_focus_keyword"),
    ("keywords", "rank_math_keywords"),
]
SEO_DESCRIPTION_MAX_LENGTH = 160

NUMERIC_FIELDS = ["regular_price", "sale_price", "weight", "length", "width", "height"]
DIMENSION_FIELDS = ["length", "width", "height"]

FALLBACK_CATEGORIES = ["Electronics", "Clothing", "Home & Garden", "Sports", "Books"]

DEFAULT_PRODUCTS_PAGE = 1
DEFAULT_PRODUCTS_PER_PAGE = 10
DEFAULT_CATEGORIES_PER_PAGE = 100
DEFAULT_CATEGORIES_ORDERBY = "name"
DEFAULT_CATEGORIES_ORDER = "asc"
