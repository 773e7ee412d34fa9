from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone

import structlog

from app.core.config import settings
from app.core.errors import InvalidArgument
from app.core.pricing import parse_price_amount, savings_percentage

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PriceRecord:
    product_key: str
    promotional_price: str | None
    recorded_at: datetime


@dataclass(frozen=True)
class DealPayload:
    reference_price: int
    display_price: str | int
    savings_percentage: int
    display_image: str


def build_deal_payload(
    promotional_price: str | None,
    reference_price: int,
    display_image: str,
) -> DealPayload:
    """
    Display bundle for one product.

    Shared by the store and by the client's offline fallback so both agree
    on the numbers.
    """
    if not promotional_price:
        return DealPayload(
            reference_price=reference_price,
            display_price=reference_price,
            savings_percentage=0,
            display_image=display_image,
        )

    amount = parse_price_amount(promotional_price)

    return DealPayload(
        reference_price=reference_price,
        display_price=promotional_price,
        savings_percentage=savings_percentage(reference_price, amount),
        display_image=display_image,
    )


class PriceRecordStore:
    """
    Latest promotional price per product key, held in memory.

    One instance per application; records are overwritten, never evicted.
    """

    def __init__(
        self,
        reference_price: int | None = None,
        display_image: str | None = None,
    ):
        self.reference_price = (
            settings.REFERENCE_PRICE if reference_price is None else reference_price
        )
        self.display_image = display_image or settings.PLACEHOLDER_IMAGE_URL

        self._records: dict[str, PriceRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def record_price(
        self, product_key: str, promotional_price: str | None = None
    ) -> PriceRecord:
        if not isinstance(product_key, str) or not product_key.strip():
            raise InvalidArgument("product_key must be a non-empty string")

        key = product_key.strip()
        record = PriceRecord(
            product_key=key,
            promotional_price=promotional_price or None,
            recorded_at=datetime.now(timezone.utc),
        )

        with self._lock:
            self._records[key] = record

        logger.info(
            "price.recorded",
            product_key=key,
            promotional_price=record.promotional_price,
        )
        return record

    def get_record(self, product_key: str) -> PriceRecord | None:
        with self._lock:
            return self._records.get((product_key or "").strip())

    def get_deal_payload(self, product_key: str) -> DealPayload:
        record = self.get_record(product_key)
        promotional_price = record.promotional_price if record else None

        payload = build_deal_payload(
            promotional_price,
            reference_price=self.reference_price,
            display_image=self.display_image,
        )

        logger.debug(
            "deal.lookup",
            product_key=product_key,
            found=record is not None,
            savings_percentage=payload.savings_percentage,
        )
        return payload
