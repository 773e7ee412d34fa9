from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.schemas.deals import (
    DealPayloadOut,
    RecordPriceRequest,
    RecordPriceResponse,
)
from app.core.errors import InvalidArgument
from app.services.price_store import PriceRecordStore

router = APIRouter(prefix="/api/prices", tags=["prices"])


def get_price_store(request: Request) -> PriceRecordStore:
    return request.app.state.price_store


@router.post("", response_model=RecordPriceResponse)
def record_price(
    payload: RecordPriceRequest,
    store: PriceRecordStore = Depends(get_price_store),
):
    try:
        store.record_price(payload.product_key, payload.promotional_price)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RecordPriceResponse()


@router.get("/{product_key:path}", response_model=DealPayloadOut)
def get_deal_payload(
    product_key: str,
    store: PriceRecordStore = Depends(get_price_store),
):
    payload = store.get_deal_payload(product_key)
    return DealPayloadOut(**asdict(payload))
