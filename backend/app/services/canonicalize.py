import re
from functools import lru_cache
from urllib.parse import urlsplit

import structlog

from app.core.config import settings

logger = structlog.get_logger(__name__)

UNKNOWN_PRODUCT = "unknown_product"

PRODUCT_SLUG_PATTERN = re.compile(r"/([^/]+)/p/")
DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9\s]")
WHITESPACE = re.compile(r"\s+")


def strip_query(url: str) -> str:
    return url.split("?")[0].split("#")[0]


def is_product_page(url: str | None, domain: str | None = None) -> bool:
    if not url:
        return False

    domain = (domain or settings.MERCHANT_DOMAIN).lower()
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()

    on_merchant = host == domain or host.endswith("." + domain)
    return on_merchant and "/p/" in parts.path


def normalize_product_key(text: str | None, max_length: int | None = None) -> str:
    if not text:
        return UNKNOWN_PRODUCT

    max_length = max_length or settings.PRODUCT_KEY_MAX_LENGTH

    key = DISALLOWED_CHARS.sub("", text).strip()
    key = WHITESPACE.sub("_", key).lower()[:max_length]

    return key or UNKNOWN_PRODUCT


@lru_cache(maxsize=1024)
def product_key_from_url(url: str) -> str:
    base_url = strip_query(url)

    slug_match = PRODUCT_SLUG_PATTERN.search(base_url)
    if not slug_match:
        logger.warning("product_key.no_slug", url=url)
        return UNKNOWN_PRODUCT

    return normalize_product_key(slug_match.group(1))


def product_key_from_title(title: str | None) -> str:
    return normalize_product_key(title)
