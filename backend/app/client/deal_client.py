from __future__ import annotations

import random
from dataclasses import asdict

import httpx
import structlog

from app.core.config import settings
from app.core.errors import Unavailable
from app.marketplaces.flipkart import pick_adapter
from app.services.price_store import DealPayload, build_deal_payload

logger = structlog.get_logger(__name__)

MOCK_PROMOTIONAL_PRICE = "₹75,999"


def simulate_promotional_price(rng: random.Random | None = None) -> str | None:
    """Coin flip standing in for a scraped Wow-Deal price."""
    rng = rng or random
    return MOCK_PROMOTIONAL_PRICE if rng.random() > 0.5 else None


def payload_from_json(data: dict) -> DealPayload:
    return DealPayload(
        reference_price=data["referencePrice"],
        display_price=data["displayPrice"],
        savings_percentage=data["savingsPercentage"],
        display_image=data["displayImage"],
    )


def payload_to_json(payload: DealPayload) -> dict:
    out = asdict(payload)
    return {
        "referencePrice": out["reference_price"],
        "displayPrice": out["display_price"],
        "displayImage": out["display_image"],
        "savingsPercentage": out["savings_percentage"],
    }


class DealClient:
    """
    Mobile-side view of the deal service.

    fetch_deal never raises for service trouble: it falls back to a payload
    built locally from the same rules the service uses.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        reference_price: int | None = None,
        display_image: str | None = None,
    ):
        self.base_url = (base_url or settings.DEAL_API_BASE_URL).rstrip("/")
        self.timeout = settings.DEAL_API_TIMEOUT if timeout is None else timeout
        self.transport = transport
        self.reference_price = (
            settings.REFERENCE_PRICE if reference_price is None else reference_price
        )
        self.display_image = display_image or settings.PLACEHOLDER_IMAGE_URL

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                r = await client.request(method, path, **kwargs)
                r.raise_for_status()
                return r
        except httpx.HTTPError as e:
            raise Unavailable(f"{method} {path} failed: {e}") from e

    async def record_price(self, product_key: str, promotional_price: str | None):
        r = await self._request(
            "POST",
            "/api/prices",
            json={"productKey": product_key, "promotionalPrice": promotional_price},
        )
        try:
            return r.json()
        except ValueError as e:
            raise Unavailable(f"malformed record response: {e}") from e

    async def get_deal_payload(self, product_key: str) -> DealPayload:
        r = await self._request("GET", f"/api/prices/{product_key}")
        try:
            return payload_from_json(r.json())
        except (ValueError, KeyError, TypeError) as e:
            raise Unavailable(f"malformed deal payload: {e}") from e

    def fallback_payload(self, promotional_price: str | None) -> DealPayload:
        return build_deal_payload(
            promotional_price,
            reference_price=self.reference_price,
            display_image=self.display_image,
        )

    async def fetch_deal(
        self, url: str, promotional_price: str | None = None
    ) -> DealPayload | None:
        adapter = pick_adapter(url)
        if not adapter:
            return None

        product_key = adapter.product_key(url)

        try:
            await self.record_price(product_key, promotional_price)
        except Unavailable as e:
            logger.warning("deal.record_failed", product_key=product_key, error=str(e))

        try:
            return await self.get_deal_payload(product_key)
        except Unavailable as e:
            logger.warning("deal.fallback", product_key=product_key, error=str(e))
            return self.fallback_payload(promotional_price)
