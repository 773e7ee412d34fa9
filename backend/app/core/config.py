import os


def _split(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings:
    REFERENCE_PRICE = int(os.getenv("REFERENCE_PRICE", "85000"))
    PLACEHOLDER_IMAGE_URL = os.getenv(
        "PLACEHOLDER_IMAGE_URL",
        "https://via.placeholder.com/300x200/FF6B35/FFFFFF?text=PiePay+Deal",
    )

    PRODUCT_KEY_MAX_LENGTH = int(os.getenv("PRODUCT_KEY_MAX_LENGTH", "20"))
    MERCHANT_DOMAIN = os.getenv("MERCHANT_DOMAIN", "flipkart.com")

    CORS_ORIGINS = _split(os.getenv("CORS_ORIGINS", "*"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = os.getenv("LOG_JSON", "false").lower() in ("1", "true", "yes")

    DEAL_API_BASE_URL = os.getenv("DEAL_API_BASE_URL", "http://127.0.0.1:3000")
    DEAL_API_TIMEOUT = float(os.getenv("DEAL_API_TIMEOUT", "5"))


settings = Settings()
