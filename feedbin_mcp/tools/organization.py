"""Organization tools: taggings, tags and saved searches."""

from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import (
    CreateSavedSearchRequest,
    DeleteSavedSearchRequest,
    DeleteTagRequest,
    NoArguments,
    RenameTagRequest,
    RunSavedSearchRequest,
    TagFeedRequest,
    UntagFeedRequest,
)
from feedbin_mcp.tools.registry import ToolGroup
from feedbin_mcp.utils import json_result, text_result

organization_tools = ToolGroup("organization")


# --- Taggings (feed-tag associations) ---

@organization_tools.tool(
    "list_taggings",
    "List all taggings (feed-to-tag associations). Shows which feeds belong to which tags/folders.",
)
async def list_taggings(client: FeedbinClient, args: NoArguments):
    response = await client.request("/taggings.json")
    return json_result(response.data)


@organization_tools.tool("tag_feed", "Tag a feed (add it to a folder/category)", TagFeedRequest)
async def tag_feed(client: FeedbinClient, args: TagFeedRequest):
    response = await client.request(
        "/taggings.json", method="POST", json={"feed_id": args.feed_id, "name": args.name}
    )
    return json_result(response.data)


@organization_tools.tool("untag_feed", "Remove a tag from a feed", UntagFeedRequest)
async def untag_feed(client: FeedbinClient, args: UntagFeedRequest):
    await client.request(f"/taggings/{args.tagging_id}.json", method="DELETE")
    return text_result(f"Removed tagging {args.tagging_id}.")


@organization_tools.tool("rename_tag", "Rename a tag across all feeds that use it", RenameTagRequest)
async def rename_tag(client: FeedbinClient, args: RenameTagRequest):
    await client.request(
        "/tags.json", method="POST", json={"old_name": args.old_name, "new_name": args.new_name}
    )
    return text_result(f'Renamed tag "{args.old_name}" to "{args.new_name}".')


@organization_tools.tool(
    "delete_tag",
    "Delete a tag (removes it from all feeds, does not delete the feeds themselves)",
    DeleteTagRequest,
)
async def delete_tag(client: FeedbinClient, args: DeleteTagRequest):
    await client.request("/tags.json", method="DELETE", json={"name": args.name})
    return text_result(f'Deleted tag "{args.name}".')


# --- Saved searches ---

@organization_tools.tool("list_saved_searches", "List all saved searches")
async def list_saved_searches(client: FeedbinClient, args: NoArguments):
    response = await client.request("/saved_searches.json")
    return json_result(response.data)


@organization_tools.tool(
    "create_saved_search",
    "Create a saved search query (e.g. 'javascript is:unread')",
    CreateSavedSearchRequest,
)
async def create_saved_search(client: FeedbinClient, args: CreateSavedSearchRequest):
    response = await client.request(
        "/saved_searches.json", method="POST", json={"name": args.name, "query": args.query}
    )
    return json_result(response.data)


@organization_tools.tool(
    "run_saved_search",
    "Run a saved search and get matching entry IDs (or full entries with include_entries)",
    RunSavedSearchRequest,
)
async def run_saved_search(client: FeedbinClient, args: RunSavedSearchRequest):
    response = await client.request(
        f"/saved_searches/{args.id}.json",
        params={"include_entries": args.include_entries, "page": args.page},
    )
    return json_result(response.data)


@organization_tools.tool("delete_saved_search", "Delete a saved search", DeleteSavedSearchRequest)
async def delete_saved_search(client: FeedbinClient, args: DeleteSavedSearchRequest):
    await client.request(f"/saved_searches/{args.id}.json", method="DELETE")
    return text_result(f"Deleted saved search {args.id}.")
