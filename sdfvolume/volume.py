"""Cubic scalar volume sampled from a signed distance function."""

from __future__ import annotations

from typing import BinaryIO, Callable, TextIO

import numpy as np

__all__ = ["Volume"]

SDF = Callable[..., object]


class Volume:
    """A ``size``-cubed grid of float samples indexed as ``data[i, j, k]``."""

    def __init__(self, size):
        size = int(size)
        if size < 0:
            raise ValueError("volume size must not be negative")
        self.size = size
        self.data = np.zeros((size, size, size), dtype=np.float32)

    @classmethod
    def _from_array(cls, array) -> "Volume":
        result = cls(array.shape[0])
        result.data[...] = array
        return result

    def set_sdf(self, sdf: SDF, value_scale=1.0, coord_scale=1.0):
        """Fill the volume by sampling ``sdf`` over the cube ``[-1, 1)``, scaled."""
        size = self.size
        coords = ((np.arange(size, dtype=np.float32) / np.float32(size) - np.float32(0.5))
                  * np.float32(2.0) * np.float32(coord_scale))
        ys, zs = np.meshgrid(coords, coords, indexing="ij")
        for i, x in enumerate(coords):
            xs = np.full_like(ys, x)
            layer = np.broadcast_to(np.asarray(sdf(xs, ys, zs)), ys.shape)
            self.data[i] = layer * value_scale

    def render_slice(self, depth=0, threshold=0.0) -> str:
        """Binarise the layer at ``depth`` into lines of '#' and ' '."""
        if not 0 <= depth < self.size:
            raise IndexError(f"depth {depth} out of range for size {self.size}")
        step = self.size // 30 + 1
        layer = self.data[depth, ::step, ::step]
        return "".join(
            "".join("#" if value > threshold else " " for value in row) + "\n"
            for row in layer
        )

    def write_slice(self, stream: TextIO, depth=0, threshold=0.0) -> TextIO:
        """Write :meth:`render_slice` to ``stream`` and return the stream."""
        stream.write(self.render_slice(depth, threshold))
        return stream

    def __str__(self) -> str:
        step = self.size // 10 + 1
        parts = []
        for layer in self.data[::step]:
            for row in layer[::step]:
                parts.append("".join(f"{value:g} " for value in row[::step]) + "\n")
            parts.append("\n")
        return "".join(parts)

    def to_bytes(self) -> bytes:
        """Map values in ``[0, 1]`` to one byte each, clamped, in i-j-k order."""
        scaled = np.clip(self.data * np.float32(255.0), 0.0, 255.0)
        return scaled.astype(np.uint8).tobytes(order="C")

    def write_binary(self, stream: BinaryIO) -> None:
        """Write :meth:`to_bytes` to a binary stream."""
        stream.write(self.to_bytes())

    def minimum(self, value) -> "Volume":
        """New volume with each sample replaced by ``min(value, sample)``."""
        return self._from_array(np.fmin(np.float32(value), self.data))

    def maximum(self, value) -> "Volume":
        """New volume with each sample replaced by ``max(value, sample)``."""
        return self._from_array(np.fmax(np.float32(value), self.data))

    def _check(self, other) -> None:
        if other.size != self.size:
            raise ValueError("Invalid Size")

    def __or__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        self._check(other)
        return self._from_array(self.data + other.data)

    def __sub__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        self._check(other)
        return self._from_array(self.data - other.data)

    def __and__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        self._check(other)
        return self._from_array(self.data * other.data)

    def __ior__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        self._check(other)
        self.data += other.data
        return self

    def __isub__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        self._check(other)
        self.data -= other.data
        return self

    def __neg__(self) -> "Volume":
        return self._from_array(-self.data)