"""
Error taxonomy for the community graph.

Every error is recoverable and raised before any state is mutated.
The HTTP layer maps each class to a status code.
"""


class CommunityError(Exception):
    """Base class for all community graph errors."""


class UnknownUser(CommunityError):
    """A referenced username is not registered."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User not found: {username}")


class DuplicateUser(CommunityError):
    """Registration collides with an existing username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User already exists: {username}")


class SelfConnection(CommunityError):
    """A connection request points a user at itself."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User cannot connect to themselves: {username}")


class DuplicateConnection(CommunityError):
    """A connection with the same (from, to, kind) already exists."""

    def __init__(self, from_user: str, to_user: str, kind):
        self.from_user = from_user
        self.to_user = to_user
        self.kind = kind
        super().__init__(
            f"Connection already exists: {from_user} -> {to_user} ({kind.value})"
        )


class InvalidDate(CommunityError):
    """The `since` value is not a calendar date."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date (expected YYYY-MM-DD): {value!r}")


class InvalidInterest(CommunityError):
    """Normalization left no usable interest token."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"No valid interest in: {value!r}")
