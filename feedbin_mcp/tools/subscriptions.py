"""Subscription tools: list, inspect, add, rename and remove feeds."""

from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import (
    GetSubscriptionRequest,
    ListSubscriptionsRequest,
    SubscribeRequest,
    UnsubscribeRequest,
    UpdateSubscriptionRequest,
)
from feedbin_mcp.tools.registry import ToolGroup
from feedbin_mcp.utils import format_json, json_result, text_result

subscription_tools = ToolGroup("subscriptions")


@subscription_tools.tool(
    "list_subscriptions",
    "List all RSS/Atom feed subscriptions in your Feedbin account",
    ListSubscriptionsRequest,
)
async def list_subscriptions(client: FeedbinClient, args: ListSubscriptionsRequest):
    response = await client.request("/subscriptions.json", params={"since": args.since, "mode": args.mode})
    return json_result(response.data)


@subscription_tools.tool(
    "get_subscription",
    "Get details for a single subscription by ID",
    GetSubscriptionRequest,
)
async def get_subscription(client: FeedbinClient, args: GetSubscriptionRequest):
    response = await client.request(f"/subscriptions/{args.id}.json")
    return json_result(response.data)


@subscription_tools.tool(
    "subscribe",
    "Subscribe to a new RSS/Atom feed. You can provide a feed URL or a site URL "
    "(Feedbin will auto-discover the feed).",
    SubscribeRequest,
)
async def subscribe(client: FeedbinClient, args: SubscribeRequest):
    response = await client.request("/subscriptions.json", method="POST", json={"feed_url": args.feed_url})
    if response.status_code == 300:
        return text_result(f"Multiple feeds found at that URL. Choose one:\n{format_json(response.data)}")
    return json_result(response.data)


@subscription_tools.tool(
    "update_subscription",
    "Update a subscription (e.g. set a custom title)",
    UpdateSubscriptionRequest,
)
async def update_subscription(client: FeedbinClient, args: UpdateSubscriptionRequest):
    response = await client.request(f"/subscriptions/{args.id}.json", method="PATCH", json={"title": args.title})
    return json_result(response.data)


@subscription_tools.tool(
    "unsubscribe",
    "Unsubscribe from a feed (delete a subscription)",
    UnsubscribeRequest,
)
async def unsubscribe(client: FeedbinClient, args: UnsubscribeRequest):
    await client.request(f"/subscriptions/{args.id}.json", method="DELETE")
    return text_result(f"Unsubscribed from subscription {args.id}.")
