import asyncio
import json

import pytest
from pydantic import ValidationError

from feedbin_mcp.tools import TOOL_REGISTRY, ToolDefinition, ToolGroup, ToolRegistry


def _call(client, name, arguments=None):
    return asyncio.run(TOOL_REGISTRY.get(name).invoke(client, arguments))


def _text(result) -> str:
    assert len(result) == 1
    return result[0].text


def test_registry_exposes_every_tool_once():
    names = TOOL_REGISTRY.names()

    assert len(TOOL_REGISTRY) == 31
    assert len(set(names)) == len(names)
    for tool in TOOL_REGISTRY.list_tools():
        assert tool.description
        assert tool.inputSchema["type"] == "object"


def test_duplicate_tool_names_are_rejected():
    group = ToolGroup("dupes")

    @group.tool("same", "first")
    async def first(client, args):
        return []

    @group.tool("same", "second")
    async def second(client, args):
        return []

    with pytest.raises(ValueError):
        ToolRegistry(group)


def test_entry_ids_schema_is_bounded():
    schema = TOOL_REGISTRY.get("mark_entries_read").to_tool().inputSchema

    assert schema["required"] == ["entry_ids"]
    assert schema["properties"]["entry_ids"]["maxItems"] == 1000


def test_list_entries_reports_pagination_headers(feedbin_client, fake_feedbin):
    fake_feedbin.add(
        "GET",
        "/entries.json",
        json=[{"id": 1, "title": "Hello"}],
        headers={"X-Feedbin-Record-Count": "250", "Link": '<https://api.feedbin.com/v2/entries.json?page=2>; rel="next"'},
    )

    text = _text(_call(feedbin_client, "list_entries", {"page": 1, "read": False}))

    assert text.startswith("Total entries: 250\nPagination: ")
    assert json.loads(text.split("\n\n", 1)[1]) == [{"id": 1, "title": "Hello"}]
    params = fake_feedbin.last_request.url.params
    assert params["page"] == "1"
    assert params["read"] == "false"
    assert "mode" not in params


def test_list_entries_without_headers_is_plain_json(feedbin_client, fake_feedbin):
    fake_feedbin.add("GET", "/entries.json", json=[])

    assert _text(_call(feedbin_client, "list_entries")) == "[]"


def test_subscribe_with_multiple_feeds_lists_choices(feedbin_client, fake_feedbin):
    fake_feedbin.add("POST", "/subscriptions.json", status_code=300, json=[{"feed_url": "https://a.example/feed"}])

    text = _text(_call(feedbin_client, "subscribe", {"feed_url": "https://a.example"}))

    assert text.startswith("Multiple feeds found")
    assert "https://a.example/feed" in text


def test_subscribe_created(feedbin_client, fake_feedbin):
    fake_feedbin.add("POST", "/subscriptions.json", status_code=201, json={"id": 5, "feed_id": 9})

    assert json.loads(_text(_call(feedbin_client, "subscribe", {"feed_url": "https://a.example/feed"}))) == {
        "id": 5,
        "feed_id": 9,
    }


def test_unsubscribe(feedbin_client, fake_feedbin):
    fake_feedbin.add("DELETE", "/subscriptions/5.json", status_code=204)

    assert _text(_call(feedbin_client, "unsubscribe", {"id": 5})) == "Unsubscribed from subscription 5."


def test_mark_entries_read_sends_ids(feedbin_client, fake_feedbin):
    fake_feedbin.add("DELETE", "/unread_entries.json", json=[1, 2, 3])

    text = _text(_call(feedbin_client, "mark_entries_read", {"entry_ids": [1, 2, 3]}))

    assert text == "Marked 3 entries as read."
    assert json.loads(fake_feedbin.last_request.content) == {"unread_entries": [1, 2, 3]}


def test_empty_entry_ids_are_sent_as_is(feedbin_client, fake_feedbin):
    fake_feedbin.add("POST", "/starred_entries.json", json=[])

    text = _text(_call(feedbin_client, "star_entries", {"entry_ids": []}))

    assert text == "Starred 0 entries."
    assert json.loads(fake_feedbin.last_request.content) == {"starred_entries": []}


def test_entry_ids_are_capped_at_1000(feedbin_client, fake_feedbin):
    with pytest.raises(ValidationError):
        _call(feedbin_client, "star_entries", {"entry_ids": list(range(1001))})

    assert fake_feedbin.requests == []


def test_rename_tag(feedbin_client, fake_feedbin):
    fake_feedbin.add("POST", "/tags.json", json=[])

    _call(feedbin_client, "rename_tag", {"old_name": "News", "new_name": "Daily"})

    assert json.loads(fake_feedbin.last_request.content) == {"old_name": "News", "new_name": "Daily"}


def test_import_opml_posts_raw_xml(feedbin_client, fake_feedbin):
    fake_feedbin.add("POST", "/imports.json", status_code=201, json={"id": 12, "complete": False})
    opml = '<?xml version="1.0"?><opml version="1.0"><body/></opml>'

    result = _call(feedbin_client, "import_opml", {"opml_xml": opml})

    request = fake_feedbin.last_request
    assert request.headers["content-type"] == "text/xml"
    assert request.content == opml.encode("utf-8")
    assert json.loads(_text(result))["id"] == 12


def test_verify_credentials_valid(feedbin_client, fake_feedbin):
    fake_feedbin.add("GET", "/authentication.json", json={})

    assert _text(_call(feedbin_client, "verify_credentials")) == "Credentials are valid."


def test_verify_credentials_invalid(feedbin_client, fake_feedbin):
    fake_feedbin.add("GET", "/authentication.json", status_code=401, content=b"")

    assert "invalid" in _text(_call(feedbin_client, "verify_credentials"))


def test_tool_definition_to_tool():
    definition = TOOL_REGISTRY.get("get_feed")

    assert isinstance(definition, ToolDefinition)
    tool = definition.to_tool()
    assert tool.name == "get_feed"
    assert tool.inputSchema["required"] == ["id"]
