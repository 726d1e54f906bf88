"""
Pydantic schemas for Connection API.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from devgraph.core.models import Connection, ConnectionKind


class ConnectionCreate(BaseModel):
    """Request body for creating a connection."""

    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(..., alias="from", min_length=1)
    to: str = Field(..., min_length=1)
    kind: ConnectionKind
    tags: list[str] = Field(default_factory=list)
    since: str  # parsed by the core so bad dates map to 400, not 422


class ConnectionResponse(BaseModel):
    """Response model for a stored connection."""

    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(..., alias="from")
    to: str
    kind: ConnectionKind
    tags: list[str]
    since: date

    @classmethod
    def from_connection(cls, connection: Connection) -> "ConnectionResponse":
        return cls(
            from_user=connection.from_user,
            to=connection.to_user,
            kind=connection.kind,
            tags=connection.sorted_tags(),
            since=connection.since,
        )


class UserConnectionsResponse(BaseModel):
    """Outgoing and incoming connections of one user."""

    username: str
    outgoing: list[ConnectionResponse]
    incoming: list[ConnectionResponse]
