"""Checkout router - charges the cart through the selected payment method.

The router only knows payment-method labels and factories; which concrete
provider runs is decided by the factory the registry hands back.
"""

import time
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from shared.correlation import get_correlation_id
from shared.models import PaymentResultRecord
from checkout_api.models.requests import PayRequest
from checkout_api.models.responses import PaymentMethodsResponse
from checkout_api.dependencies import get_session_id
from checkout_api.services.cart import CartService
from checkout_api.services.payment_service import InvalidAmountError
from checkout_api.services.registry import UnknownProviderError
from checkout_api.services.result_store import PaymentResultStore

logger = logging.getLogger("checkoutrail.checkout")
router = APIRouter()


@router.get("/payment-methods", response_model=PaymentMethodsResponse)
async def list_payment_methods(request: Request):
    return PaymentMethodsResponse(methods=request.app.state.registry.labels())


@router.post("/pay")
async def pay(
    req: PayRequest,
    request: Request,
    session_id: str = Depends(get_session_id),
):
    registry = request.app.state.registry
    payment_service = request.app.state.payment_service
    cart = CartService(session_id)
    results = PaymentResultStore(session_id)

    if not cart.get_cart():
        raise HTTPException(status_code=400, detail="Cart is empty")
    total = cart.get_total()

    try:
        factory = registry.resolve(req.payment_method)
    except UnknownProviderError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        outcome = await payment_service.process_payment(factory, total)
    except InvalidAmountError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception(f"[{get_correlation_id()}] Payment processing error: {e}")
        record = PaymentResultRecord(
            success=False,
            transaction_id=f"ERR-{int(time.time() * 1000)}",
            message=str(e) or "Unknown error occurred",
            provider=req.payment_method,
            amount=total,
        )
        results.save(record)
        return record.to_dict()

    record = PaymentResultRecord.from_outcome(outcome, total)
    results.save(record)

    if outcome.success:
        cart.clear_cart()

    logger.info(
        f"[{get_correlation_id()}] Checkout {session_id}: {outcome.transaction_id} "
        f"{'approved' if outcome.success else 'declined'}"
    )
    return record.to_dict()
