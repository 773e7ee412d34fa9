from abc import ABC, abstractmethod


class MarketplaceAdapter(ABC):
    name: str = ""

    @abstractmethod
    def can_handle(self, url: str) -> bool: ...

    @abstractmethod
    def product_key(self, url: str) -> str: ...
