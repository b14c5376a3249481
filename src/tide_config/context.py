"""Block nesting state used while scanning a file."""


class ContextStack:
    """Names of the blocks currently open during a scan.

    One stack belongs to one file scan; imported files get their own.
    """

    def __init__(self) -> None:
        self._segments: list[str] = []

    def push(self, name: str) -> None:
        self._segments.append(name)

    def pop(self) -> str | None:
        """Close the innermost block.

        Returns:
            The closed block name, or None if no block was open
        """
        if not self._segments:
            return None
        return self._segments.pop()

    def qualify(self, field_name: str) -> str:
        """Build the dotted key for a field in the current block.

        Examples:
            >>> stack = ContextStack()
            >>> stack.push("database")
            >>> stack.qualify("port")
            'database.port'
        """
        return ".".join([*self._segments, field_name]).strip(".")

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)
