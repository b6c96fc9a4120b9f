from typing import Any, TypeAlias


# Type aliases for JSON documents kept in the record store
JSONValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None

# Type aliases for command handlers
CommandRequest: TypeAlias = dict[str, Any]
CommandResponse: TypeAlias = dict[str, Any]
AppConfig: TypeAlias = dict[str, Any]
