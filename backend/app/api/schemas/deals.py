from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordPriceRequest(BaseModel):
    # productTitle / wowDealPrice are what the first mobile build sends
    product_key: str = Field(
        validation_alias=AliasChoices("productKey", "productTitle", "product_key")
    )
    promotional_price: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "promotionalPrice", "wowDealPrice", "promotional_price"
        ),
    )


class RecordPriceResponse(BaseModel):
    success: bool = True
    message: str = "Price stored"


class DealPayloadOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reference_price: int
    display_price: str | int
    display_image: str
    savings_percentage: int
