import argparse
import asyncio
import json
import sys

from app.client.deal_client import (
    DealClient,
    payload_to_json,
    simulate_promotional_price,
)
from app.core.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Record a promotional price for a product page and show its deal"
    )
    parser.add_argument("url", help="product page URL")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--price", help='promotional price, e.g. "₹75,999"')
    group.add_argument(
        "--simulate", action="store_true", help="use a randomly mocked price"
    )
    parser.add_argument("--base-url", help="deal API base URL")
    return parser


async def run(args, client: DealClient | None = None) -> dict | None:
    client = client or DealClient(base_url=args.base_url)
    price = simulate_promotional_price() if args.simulate else args.price

    payload = await client.fetch_deal(args.url, price)
    if payload is None:
        return None
    return payload_to_json(payload)


def main(argv=None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    result = asyncio.run(run(args))
    if result is None:
        print("Unable to fetch deal information", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
