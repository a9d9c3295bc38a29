"""Type definitions for the Pusher REST client."""

from typing import Callable, TypeAlias

# Any value the JSON encoder accepts as an event payload
JSONValue: TypeAlias = (
    None | bool | int | float | str | list["JSONValue"] | dict[str, "JSONValue"]
)

# Returns the current Unix time in whole seconds
Clock: TypeAlias = Callable[[], int]
