"""Exception hierarchy for tunequery."""

from pathlib import Path


class TuneQueryError(Exception):
    """Base exception for all tunequery errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all tunequery errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(TuneQueryError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Query Errors
class QueryError(TuneQueryError):
    """Query-related errors."""

    pass


class QueryValidationError(QueryError):
    """Clause sequence does not form a valid query."""

    pass


class TooManyLogicGroupsError(QueryValidationError):
    """Filter logic changes more often than a single subgroup allows."""

    def __init__(self, first_change: int, second_change: int, index: int) -> None:
        self.first_change = first_change
        self.second_change = second_change
        self.index = index
        super().__init__(
            f"Filter logic is too complex: subgroup at clauses {first_change}-{second_change}, "
            f"another logic change at clause {index}"
        )


class QueryParseError(QueryError):
    """Raised when a query string cannot be parsed."""

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        super().__init__(f"Failed to parse query '{query}': {message}")


class QueryEvaluationError(QueryError):
    """A clause cannot be applied to a track."""

    pass


class InapplicableOperatorError(QueryEvaluationError):
    """Operator is not applicable to the clause subject."""

    def __init__(self, operator: str, subject: str) -> None:
        self.operator = operator
        self.subject = subject
        super().__init__(f"'{operator}' operator not applicable to {subject}")


class InvalidClauseValueError(QueryEvaluationError):
    """Clause text is not valid for the clause subject."""

    def __init__(self, subject: str, text: str) -> None:
        self.subject = subject
        self.text = text
        super().__init__(f"{subject} requires a whole number, got '{text}'")


# Hierarchy Errors
class HierarchyError(TuneQueryError):
    """Playlist snapshot does not describe a valid forest."""

    pass


class UnresolvedParentError(HierarchyError):
    """Playlist refers to a parent that is not in the snapshot."""

    def __init__(self, playlist_id: str, parent_id: str) -> None:
        self.playlist_id = playlist_id
        self.parent_id = parent_id
        super().__init__(f"Playlist {playlist_id} refers to unknown parent {parent_id}")


class PlaylistCycleError(HierarchyError):
    """Parent pointers loop back on themselves."""

    def __init__(self, playlist_id: str) -> None:
        self.playlist_id = playlist_id
        super().__init__(f"Parent chain of playlist {playlist_id} contains a cycle")


# Entity Not Found Errors
class NotFoundError(TuneQueryError):
    """Requested entity not found."""

    pass


class PlaylistNotFoundError(NotFoundError):
    """Playlist doesn't exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Playlist not found: {name}")


class ComparisonError(TuneQueryError):
    """Playlist comparison cannot be performed."""

    pass


class DuplicateCriteriaError(TuneQueryError):
    """Duplicate match criteria contradict each other."""

    pass


class SnapshotError(TuneQueryError):
    """Library snapshot cannot be loaded."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid library snapshot {path}: {detail}")


# Internal Errors
class InternalError(TuneQueryError):
    """Programming fault; not recoverable by the caller."""

    pass


class ColumnValueError(InternalError):
    """Column value does not match the column's declared kind."""

    def __init__(self, column: str, value: str, kind: str) -> None:
        self.column = column
        self.value = value
        self.kind = kind
        super().__init__(f"Column '{column}' is {kind} but holds '{value}'")
