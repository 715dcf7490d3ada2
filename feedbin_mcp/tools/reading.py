"""Reading-state tools: unread, starred, recently read and updated entries."""

from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import EntryIdsRequest, GetUpdatedEntriesRequest, NoArguments
from feedbin_mcp.tools.registry import ToolGroup
from feedbin_mcp.utils import json_result, text_result

reading_tools = ToolGroup("reading")


# --- Unread entries ---

@reading_tools.tool(
    "get_unread_entries",
    "Get all unread entry IDs. Use list_entries with the IDs to fetch full content.",
)
async def get_unread_entries(client: FeedbinClient, args: NoArguments):
    response = await client.request("/unread_entries.json")
    return json_result(response.data)


@reading_tools.tool("mark_entries_read", "Mark entries as read", EntryIdsRequest)
async def mark_entries_read(client: FeedbinClient, args: EntryIdsRequest):
    await client.request("/unread_entries.json", method="DELETE", json={"unread_entries": args.entry_ids})
    return text_result(f"Marked {len(args.entry_ids)} entries as read.")


@reading_tools.tool("mark_entries_unread", "Mark entries as unread", EntryIdsRequest)
async def mark_entries_unread(client: FeedbinClient, args: EntryIdsRequest):
    await client.request("/unread_entries.json", method="POST", json={"unread_entries": args.entry_ids})
    return text_result(f"Marked {len(args.entry_ids)} entries as unread.")


# --- Starred entries ---

@reading_tools.tool("get_starred_entries", "Get all starred entry IDs")
async def get_starred_entries(client: FeedbinClient, args: NoArguments):
    response = await client.request("/starred_entries.json")
    return json_result(response.data)


@reading_tools.tool("star_entries", "Star (favorite) entries", EntryIdsRequest)
async def star_entries(client: FeedbinClient, args: EntryIdsRequest):
    await client.request("/starred_entries.json", method="POST", json={"starred_entries": args.entry_ids})
    return text_result(f"Starred {len(args.entry_ids)} entries.")


@reading_tools.tool("unstar_entries", "Unstar (unfavorite) entries", EntryIdsRequest)
async def unstar_entries(client: FeedbinClient, args: EntryIdsRequest):
    await client.request("/starred_entries.json", method="DELETE", json={"starred_entries": args.entry_ids})
    return text_result(f"Unstarred {len(args.entry_ids)} entries.")


# --- History ---

@reading_tools.tool("get_recently_read", "Get recently read entry IDs (reading history)")
async def get_recently_read(client: FeedbinClient, args: NoArguments):
    response = await client.request("/recently_read_entries.json")
    return json_result(response.data)


@reading_tools.tool(
    "get_updated_entries",
    "Get entry IDs for entries whose content has been updated",
    GetUpdatedEntriesRequest,
)
async def get_updated_entries(client: FeedbinClient, args: GetUpdatedEntriesRequest):
    response = await client.request("/updated_entries.json", params={"since": args.since})
    return json_result(response.data)
