from app.core.config import settings
from app.marketplaces.base import MarketplaceAdapter
from app.services.canonicalize import is_product_page, product_key_from_url


class FlipkartAdapter(MarketplaceAdapter):
    name = "flipkart"

    def __init__(self, domain: str | None = None):
        self.domain = domain or settings.MERCHANT_DOMAIN

    def can_handle(self, url: str) -> bool:
        return is_product_page(url, domain=self.domain)

    def product_key(self, url: str) -> str:
        return product_key_from_url(url)


adapters = [FlipkartAdapter()]


def pick_adapter(url: str) -> MarketplaceAdapter | None:
    for a in adapters:
        if a.can_handle(url):
            return a
    return None
