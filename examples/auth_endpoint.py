#!/usr/bin/env python3
"""
Channel authorization endpoint example.

Serves the URL a browser client posts to before subscribing to a private or
presence channel. The client sends socket_id and channel_name as form data
and receives the JSON token in return.
"""

import logging

from aiohttp import web

from pusher_rest import PusherClient, PusherError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

pusher = PusherClient(auth_key="YOUR API KEY", secret="YOUR SECRET", app_id="YOUR APP ID")


async def authorize(request: web.Request) -> web.Response:
    form = await request.post()
    socket_id = str(form.get("socket_id", ""))
    channel = str(form.get("channel_name", ""))

    try:
        if channel.startswith("presence-"):
            # Replace with the identity of the logged-in user
            token = pusher.authorize_presence(
                socket_id, "42", {"name": "Alice"}, channel=channel
            )
        else:
            token = pusher.authorize_private(socket_id, channel)
    except PusherError as e:
        logger.warning("refused channel=%s: %s", channel, e)
        raise web.HTTPForbidden() from e

    return web.Response(text=token, content_type="application/json")


def main() -> None:
    app = web.Application()
    app.router.add_post("/pusher/auth", authorize)
    web.run_app(app, port=8080)


if __name__ == "__main__":
    main()
