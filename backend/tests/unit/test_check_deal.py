"""Tests for app.jobs.check_deal - command-line deal check."""

from __future__ import annotations

import httpx
import pytest

from app.client.deal_client import DealClient
from app.jobs.check_deal import build_parser, main, run


@pytest.mark.asyncio
async def test_run_prints_payload_fields(app, product_url):
    client = DealClient(
        base_url="http://deals.test", transport=httpx.ASGITransport(app=app)
    )
    args = build_parser().parse_args([product_url, "--price", "₹75,999"])

    result = await run(args, client=client)

    assert result["displayPrice"] == "₹75,999"
    assert result["savingsPercentage"] == 11


def test_main_non_product_page(capsys):
    code = main(["https://www.flipkart.com/search?q=iphone"])

    assert code == 1
    assert "Unable to fetch deal information" in capsys.readouterr().err


def test_price_and_simulate_are_exclusive():
    parser = build_parser()
    args = parser.parse_args(["https://x.test/a/p/b", "--simulate"])
    assert args.simulate is True
    assert args.price is None
