"""Entry tools: paginated entry listing and single entry/feed lookups."""

from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import (
    GetEntryRequest,
    GetFeedEntriesRequest,
    GetFeedRequest,
    ListEntriesRequest,
)
from feedbin_mcp.tools.registry import ToolGroup
from feedbin_mcp.utils import format_json, json_result, text_result

entry_tools = ToolGroup("entries")

RECORD_COUNT_HEADER = "X-Feedbin-Record-Count"


@entry_tools.tool(
    "list_entries",
    "List feed entries (articles) with optional filters. Returns paginated results (100 per page).",
    ListEntriesRequest,
)
async def list_entries(client: FeedbinClient, args: ListEntriesRequest):
    response = await client.request("/entries.json", params=args.model_dump())

    # Feedbin reports the total and the next/last pages in headers, not the body
    meta = []
    count = response.headers.get(RECORD_COUNT_HEADER)
    link = response.headers.get("Link")
    if count:
        meta.append(f"Total entries: {count}")
    if link:
        meta.append(f"Pagination: {link}")

    body = format_json(response.data)
    if meta:
        return text_result("\n".join(meta) + "\n\n" + body)
    return text_result(body)


@entry_tools.tool(
    "get_entry",
    "Get a single entry by ID with full content",
    GetEntryRequest,
)
async def get_entry(client: FeedbinClient, args: GetEntryRequest):
    response = await client.request(f"/entries/{args.id}.json", params={"mode": args.mode})
    return json_result(response.data)


@entry_tools.tool(
    "get_feed_entries",
    "Get entries for a specific feed",
    GetFeedEntriesRequest,
)
async def get_feed_entries(client: FeedbinClient, args: GetFeedEntriesRequest):
    response = await client.request(
        f"/feeds/{args.feed_id}/entries.json",
        params={"page": args.page, "since": args.since, "mode": args.mode},
    )
    return json_result(response.data)


@entry_tools.tool(
    "get_feed",
    "Get metadata for a specific feed (title, URL, site URL)",
    GetFeedRequest,
)
async def get_feed(client: FeedbinClient, args: GetFeedRequest):
    response = await client.request(f"/feeds/{args.id}.json")
    return json_result(response.data)
