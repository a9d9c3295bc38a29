#!/usr/bin/env python3
"""
Trigger example.

Publishes one event on a channel and prints whether the API accepted it.
Fill in the credentials from your Pusher application dashboard.
"""

import asyncio
import logging

from pusher_rest import PusherClient, RawResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def main() -> None:
    async with PusherClient(
        auth_key="YOUR API KEY",
        secret="YOUR SECRET",
        app_id="YOUR APP ID",
        channel="test_channel",
    ) as pusher:
        accepted = await pusher.trigger("my_event", "Hello, World!")
        logger.info("accepted=%s", accepted)

        # Debug mode hands back the raw response, even on failure
        response = await pusher.trigger("my_event", {"message": "hi"}, debug=True)
        if isinstance(response, RawResponse):
            logger.info("status=%s body=%r error=%s", response.status, response.body, response.error)


if __name__ == "__main__":
    asyncio.run(main())
