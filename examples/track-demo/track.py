"""Customer.io tracking demo.

Identifies a customer, fires a burst of events concurrently (they reach the
Track API one at a time), then optionally deletes the customer.

Usage:
    CIO_SITE_ID=... CIO_API_KEY=... python track.py user-42 --delete
"""

import argparse
import asyncio
from datetime import datetime, timezone

from cio_tracker import CustomerIoException, StaticIdentityProvider, TrackingClient


async def main(customer_id: str, delete: bool) -> None:
    identity = StaticIdentityProvider(customer_id, {"email": f"{customer_id}@example.com"})

    async with TrackingClient.from_settings(identity) as client:
        await client.identify()
        await asyncio.gather(
            *(
                client.track_event("demo_step", {"step": i}, datetime.now(timezone.utc))
                for i in range(3)
            )
        )
        if delete:
            await client.delete_customer()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("customer_id")
    parser.add_argument("--delete", action="store_true")
    args = parser.parse_args()
    try:
        asyncio.run(main(args.customer_id, args.delete))
    except CustomerIoException as e:
        raise SystemExit(f"Tracking failed: {e.message}")
