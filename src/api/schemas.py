"""Response Pydantic models."""

from pydantic import BaseModel


class PriceInfo(BaseModel):
    starting_inr: int | None = None
    starting_lakhs: str | None = None
    top_inr: int | None = None
    top_lakhs: str | None = None
    basis: str


class CarImage(BaseModel):
    url: str
    name: str
    source: str = ""


class PriceLookupResponse(BaseModel):
    query: str
    brand: str | None = None
    model: str
    info: str | None = None
    prices: PriceInfo
    image: CarImage | None = None
    sources: list[str] = []
    last_checked: str
    disclaimer: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
