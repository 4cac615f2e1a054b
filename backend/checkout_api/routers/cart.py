"""Cart router - add products, view totals, clear."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from shared.models import Product
from checkout_api.models.requests import AddToCartRequest
from checkout_api.models.responses import (
    AddToCartResponse,
    CartResponse,
    ProductResponse,
    format_amount,
)
from checkout_api.dependencies import get_session_id
from checkout_api.services.cart import CartService

logger = logging.getLogger("checkoutrail.cart")
router = APIRouter()


def _cart_response(cart: CartService) -> CartResponse:
    products = cart.get_cart()
    total = sum(p.price for p in products)
    return CartResponse(
        items=[
            ProductResponse(**p.model_dump(), price_display=format_amount(p.price))
            for p in products
        ],
        count=len(products),
        total=total,
        total_display=format_amount(total),
    )


@router.get("", response_model=CartResponse)
async def get_cart(
    session_id: str = Depends(get_session_id),
):
    return _cart_response(CartService(session_id))


@router.post("/items", status_code=201, response_model=AddToCartResponse)
async def add_item(
    req: AddToCartRequest,
    session_id: str = Depends(get_session_id),
):
    cart = CartService(session_id)
    if not cart.add_to_cart(Product(**req.model_dump())):
        raise HTTPException(status_code=409, detail=f"Product {req.id} already in cart")
    return AddToCartResponse(added=True, count=len(cart.get_cart()))


@router.delete("", response_model=CartResponse)
async def clear_cart(
    session_id: str = Depends(get_session_id),
):
    cart = CartService(session_id)
    cart.clear_cart()
    return _cart_response(cart)
