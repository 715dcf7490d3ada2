"""
Argument models for the Feedbin MCP tools.

Each model validates the arguments of one tool, and its JSON schema is
published as that tool's inputSchema.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

ExtendedMode = Optional[Literal["extended"]]
EntryIds = List[int]


class NoArguments(BaseModel):
    """Tools that take no arguments."""


# --- Subscriptions ---

class ListSubscriptionsRequest(BaseModel):
    since: Optional[str] = Field(
        None, description="ISO 8601 timestamp - only return subscriptions created after this date"
    )
    mode: ExtendedMode = Field(None, description="Set to 'extended' to include JSON Feed metadata")


class GetSubscriptionRequest(BaseModel):
    id: int = Field(..., description="The subscription ID")


class SubscribeRequest(BaseModel):
    feed_url: str = Field(..., description="The feed URL or website URL to subscribe to")


class UpdateSubscriptionRequest(BaseModel):
    id: int = Field(..., description="The subscription ID")
    title: str = Field(..., description="New custom title for the subscription")


class UnsubscribeRequest(BaseModel):
    id: int = Field(..., description="The subscription ID to remove")


# --- Entries ---

class ListEntriesRequest(BaseModel):
    page: Optional[int] = Field(None, description="Page number (default 1)")
    since: Optional[str] = Field(None, description="ISO 8601 timestamp - only entries created after this date")
    ids: Optional[str] = Field(None, description="Comma-separated entry IDs to fetch (max 100)")
    read: Optional[bool] = Field(None, description="Filter by read status: true=read only, false=unread only")
    starred: Optional[bool] = Field(None, description="Filter by starred status")
    per_page: Optional[int] = Field(None, description="Results per page (default 100)")
    mode: ExtendedMode = Field(None, description="Set to 'extended' for extra metadata (images, enclosures, etc.)")
    include_content_diff: Optional[bool] = Field(None, description="Include HTML diff if the entry was updated")


class GetEntryRequest(BaseModel):
    id: int = Field(..., description="The entry ID")
    mode: ExtendedMode = Field(None, description="Set to 'extended' for extra metadata")


class GetFeedEntriesRequest(BaseModel):
    feed_id: int = Field(..., description="The feed ID")
    page: Optional[int] = Field(None, description="Page number")
    since: Optional[str] = Field(None, description="ISO 8601 timestamp filter")
    mode: ExtendedMode = Field(None, description="Set to 'extended' for extra metadata")


class GetFeedRequest(BaseModel):
    id: int = Field(..., description="The feed ID")


# --- Reading state ---

class EntryIdsRequest(BaseModel):
    entry_ids: EntryIds = Field(
        ..., max_length=1000, description="Array of entry IDs (max 1000)"
    )


class GetUpdatedEntriesRequest(BaseModel):
    since: Optional[str] = Field(
        None, description="ISO 8601 timestamp - only return entries updated after this date"
    )


# --- Organization ---

class TagFeedRequest(BaseModel):
    feed_id: int = Field(..., description="The feed ID to tag")
    name: str = Field(..., description="The tag name (folder/category)")


class UntagFeedRequest(BaseModel):
    tagging_id: int = Field(..., description="The tagging ID to delete")


class RenameTagRequest(BaseModel):
    old_name: str = Field(..., description="Current tag name")
    new_name: str = Field(..., description="New tag name")


class DeleteTagRequest(BaseModel):
    name: str = Field(..., description="Tag name to delete")


class CreateSavedSearchRequest(BaseModel):
    name: str = Field(..., description="Display name for the saved search")
    query: str = Field(..., description="Search query string")


class RunSavedSearchRequest(BaseModel):
    id: int = Field(..., description="Saved search ID")
    include_entries: Optional[bool] = Field(None, description="Return full entry objects instead of just IDs")
    page: Optional[int] = Field(None, description="Page number for results")


class DeleteSavedSearchRequest(BaseModel):
    id: int = Field(..., description="Saved search ID to delete")


# --- Content ---

class SavePageRequest(BaseModel):
    url: str = Field(..., description="The webpage URL to save")
    title: Optional[str] = Field(None, description="Optional custom title")


class ImportOpmlRequest(BaseModel):
    opml_xml: str = Field(..., description="The OPML XML content to import")


class GetImportStatusRequest(BaseModel):
    id: int = Field(..., description="The import ID to check")
