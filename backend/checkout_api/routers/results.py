"""Payment result router - hands the last outcome to the result page once."""

from fastapi import APIRouter, Depends, HTTPException

from checkout_api.dependencies import get_session_id
from checkout_api.services.result_store import PaymentResultStore

router = APIRouter()


@router.get("")
async def get_payment_result(session_id: str = Depends(get_session_id)):
    record = PaymentResultStore(session_id).pop()
    if record is None:
        raise HTTPException(status_code=404, detail="No payment result pending")
    return record.to_dict()
