"""
Session table: the live MCP sessions of this process, keyed by session id.

Every method is synchronous and never awaits, so under the event loop a
caller sees either the state before or after an operation, never a partial
one. Entries only enter the table once their transport has accepted the
initialize request.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from mcp.server import Server

from feedbin_mcp.core.errors import SessionCollisionError

if TYPE_CHECKING:
    from feedbin_mcp.gateway.transport import SessionState, SessionTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionEntry:
    """A session's transport and protocol handler, owned by exactly one session."""
    session_id: str
    transport: "SessionTransport"
    server: Server

    @property
    def state(self) -> "SessionState":
        return self.transport.state


class SessionTable:
    """Mapping from session id to the entry serving that session."""

    def __init__(self):
        self._entries: Dict[str, SessionEntry] = {}

    def insert(self, entry: SessionEntry) -> None:
        """
        Register a session.

        Raises:
            SessionCollisionError: If the id is already live
        """
        if entry.session_id in self._entries:
            raise SessionCollisionError(entry.session_id)
        self._entries[entry.session_id] = entry
        logger.debug(f"Session table size now {len(self._entries)}")

    def lookup(self, session_id: str) -> Optional[SessionEntry]:
        return self._entries.get(session_id)

    def remove(self, session_id: str) -> Optional[SessionEntry]:
        """Drop a session; a no-op if it is not present."""
        return self._entries.pop(session_id, None)

    def session_ids(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

