"""Caller-owned growable text buffer."""


class TextBuffer:
    """Growable text with a known capacity.

    The formatter writes into a TextBuffer supplied by the caller.
    `len(buffer)` is the number of characters held; `capacity` only grows,
    doubling (or jumping straight to the needed size) when content outgrows it.

        >>> buf = TextBuffer("x = ")
        >>> buf.append("1")
        >>> str(buf)
        'x = 1'
    """

    __slots__ = ("_parts", "_length", "_capacity")

    def __init__(self, initial: str = "", capacity: int = 0):
        self._parts: list[str] = []
        self._length = 0
        self._capacity = max(capacity, 0)
        if initial:
            self.append(initial)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def value(self) -> str:
        """Current content; joins pending parts once."""
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def reserve(self, size: int) -> None:
        """Make room for at least `size` characters."""
        if size > self._capacity:
            self._capacity = max(size, self._capacity * 2)

    def assign(self, text: str) -> None:
        """Replace the content with `text`."""
        self.clear()
        self.append(text)

    def append(self, text: str) -> None:
        if not text:
            return
        self.reserve(self._length + len(text))
        self._parts.append(text)
        self._length += len(text)

    def clear(self) -> None:
        """Drop the content but keep the capacity."""
        self._parts.clear()
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"TextBuffer({self.value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, TextBuffer):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    __hash__ = None
