from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """A product category as returned by the catalog."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    slug: str = ""
    description: str | None = None
    parent: int | None = None
    count: int | None = None


class CategoryCreate(BaseModel):
    name: str = ""
    description: str | None = None
    slug: str | None = None
    parent: int | None = None

    def to_payload(self) -> dict:
        payload: dict = {"name": self.name}

        if self.description:
            payload["description"] = self.description
        if self.slug:
            payload["slug"] = self.slug
        if self.parent:
            payload["parent"] = self.parent

        return payload
