from __future__ import annotations

_LOW = 0b0000_0001
_HIGH = 0b1000_0000


class Tape:
    """Unbounded bidirectional bit tape backed by a forward-growing bytearray.

    Each stored byte is a group of eight logical cells. Even group indices
    extend the tape to the right of the origin and odd ones to the left, so
    the logical cell ``n`` lives in group ``2 * (n // 8)`` when ``n >= 0`` and
    in group ``2 * ((-n - 1) // 8) + 1`` otherwise. Within a group, the mask
    always walks low-to-high when moving right.
    """

    def __init__(self) -> None:
        self._data = bytearray(1)
        self._group = 0
        self._mask = _LOW

    @property
    def position(self) -> int:
        """Signed logical index of the cell under the cursor."""
        bit = self._mask.bit_length() - 1
        if self._group % 2 == 0:
            return (self._group // 2) * 8 + bit
        return -((self._group + 1) // 2) * 8 + bit

    @property
    def storage_size(self) -> int:
        return len(self._data)

    def move_right(self) -> None:
        if self._mask != _HIGH:
            self._mask <<= 1
            return
        self._mask = _LOW
        if self._group == 1:
            self._enter(0)
        elif self._group % 2 == 0:
            self._enter(self._group + 2)
        else:
            self._enter(self._group - 2)

    def move_left(self) -> None:
        if self._mask != _LOW:
            self._mask >>= 1
            return
        self._mask = _HIGH
        if self._group == 0:
            self._enter(1)
        elif self._group % 2 == 1:
            self._enter(self._group + 2)
        else:
            self._enter(self._group - 2)

    def _enter(self, group: int) -> None:
        self._group = group
        if group >= len(self._data):
            # Two bytes keep both the left and right progressions in bounds.
            self._data.extend(b"\x00\x00")

    def read_bit(self) -> bool:
        return bool(self._data[self._group] & self._mask)

    def set_bit(self, value: bool) -> None:
        if value:
            self._data[self._group] |= self._mask
        else:
            self._data[self._group] &= ~self._mask & 0xFF

    def flip_bit(self) -> None:
        self._data[self._group] ^= self._mask

    def __repr__(self) -> str:
        return f"Tape(position={self.position}, groups={len(self._data)})"
