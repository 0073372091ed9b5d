import itertools
import threading
from dataclasses import dataclass
from typing import Dict

from ..errors import BufferTooSmall, InvalidHandle


@dataclass(frozen=True)
class ProofHandle:
    """Opaque reference to a generated proof owned by the caller until released."""

    id: int
    length: int


class ProofBufferRegistry:
    """Holds generated proof buffers until their handles are released."""

    def __init__(self) -> None:
        self._buffers: Dict[int, bytes] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def register(self, proof: bytes) -> ProofHandle:
        with self._lock:
            handle = ProofHandle(next(self._ids), len(proof))
            self._buffers[handle.id] = bytes(proof)
        return handle

    def read(self, handle: ProofHandle) -> bytes:
        with self._lock:
            return self._lookup(handle)

    def copy_into(self, handle: ProofHandle, out: bytearray) -> int:
        """Copy the proof into a caller-provided writable buffer.

        Returns:
            int: Number of bytes written

        Raises:
            BufferTooSmall: If `out` cannot hold the proof
        """
        with self._lock:
            proof = self._lookup(handle)
        view = memoryview(out).cast("B")
        if view.readonly:
            raise TypeError("output buffer must be writable")
        if len(view) < len(proof):
            raise BufferTooSmall(f"need {len(proof)} bytes, buffer holds {len(view)}")
        view[: len(proof)] = proof
        return len(proof)

    def release(self, handle: ProofHandle) -> None:
        with self._lock:
            self._lookup(handle)
            del self._buffers[handle.id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffers)

    # Private Methods
    # --------------

    def _lookup(self, handle: ProofHandle) -> bytes:
        if not isinstance(handle, ProofHandle) or handle.id not in self._buffers:
            raise InvalidHandle(f"unknown or released proof handle: {handle!r}")
        return self._buffers[handle.id]
