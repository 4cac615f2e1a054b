"""API response models."""

from pydantic import BaseModel


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    price_display: str
    image: str = ""


class CartResponse(BaseModel):
    items: list[ProductResponse]
    count: int
    total: float
    total_display: str


class AddToCartResponse(BaseModel):
    added: bool
    count: int


class PaymentMethodsResponse(BaseModel):
    methods: list[str]


def format_amount(amount: float) -> str:
    return f"{amount:.2f}€"
