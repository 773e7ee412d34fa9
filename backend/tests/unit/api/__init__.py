"""Unit tests for the HTTP route modules.

Routes are exercised through FastAPI's TestClient against an app built
around a fresh PriceRecordStore.
"""
