"""Content tools: saved pages, icons, OPML imports and a credentials check."""

import logging

import httpx

from feedbin_mcp.core.errors import FeedbinAPIError
from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import (
    GetImportStatusRequest,
    ImportOpmlRequest,
    NoArguments,
    SavePageRequest,
)
from feedbin_mcp.tools.registry import ToolGroup
from feedbin_mcp.utils import json_result, text_result

logger = logging.getLogger(__name__)

content_tools = ToolGroup("content")


@content_tools.tool(
    "save_page",
    "Save a webpage URL as a Feedbin entry (read-later). Returns the created entry.",
    SavePageRequest,
)
async def save_page(client: FeedbinClient, args: SavePageRequest):
    body = {"url": args.url}
    if args.title:
        body["title"] = args.title
    response = await client.request("/pages.json", method="POST", json=body)
    return json_result(response.data)


@content_tools.tool("get_icons", "Get favicons for all subscribed feeds")
async def get_icons(client: FeedbinClient, args: NoArguments):
    response = await client.request("/icons.json")
    return json_result(response.data)


@content_tools.tool(
    "import_opml",
    "Import feeds from an OPML file (provide the XML content as a string)",
    ImportOpmlRequest,
)
async def import_opml(client: FeedbinClient, args: ImportOpmlRequest):
    response = await client.request(
        "/imports.json", method="POST", content=args.opml_xml.encode("utf-8"), content_type="text/xml"
    )
    return json_result(response.data)


@content_tools.tool(
    "get_import_status",
    "Check the status of an OPML import job",
    GetImportStatusRequest,
)
async def get_import_status(client: FeedbinClient, args: GetImportStatusRequest):
    response = await client.request(f"/imports/{args.id}.json")
    return json_result(response.data)


@content_tools.tool("verify_credentials", "Verify that your Feedbin credentials are valid")
async def verify_credentials(client: FeedbinClient, args: NoArguments):
    try:
        await client.request("/authentication.json")
    except (FeedbinAPIError, httpx.HTTPError) as e:
        logger.warning(f"⚠️ Feedbin credential check failed: {e}")
        return text_result("Credentials are invalid or Feedbin is unreachable.")
    return text_result("Credentials are valid.")
