"""API request models."""

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    id: int
    name: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image: str = ""


class PayRequest(BaseModel):
    payment_method: str
