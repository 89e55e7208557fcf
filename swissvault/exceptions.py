"""Error hierarchy raised while resetting the demo database."""


class SeedError(Exception):
    """Base exception for every failure of a seed run."""


class FixtureError(SeedError):
    """Raised when the fixture set breaks its own reference rules."""


class HashingError(SeedError):
    """Raised when a password cannot be hashed."""


class PersistenceError(SeedError):
    """Raised when a delete or insert against the database fails."""
