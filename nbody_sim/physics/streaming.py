"""Background production of snapshots with a bounded buffer.

One producer thread steps the simulation and publishes snapshots; consumers
iterate the stream. The producer must hold one of ``buffer_capacity`` slots
before it may take a step, and a slot is freed only when a consumer takes a
snapshot, so the simulation never runs more than ``buffer_capacity`` steps
ahead of the consumer.
"""

import queue
import threading
import warnings
from typing import Optional

from nbody_sim.physics.errors import StepSizeUnderflowError
from nbody_sim.physics.snapshot import SystemSnapshot


class SnapshotStream:
    """Single-pass, forward-only iterator over produced snapshots.

    The sequence is infinite until the stream is cancelled or the producer
    stops. Cancellation is cooperative: the producer finishes the step it is
    in and takes no further steps.
    """

    POLL_INTERVAL = 0.05  # seconds between cancellation checks while blocked

    def __init__(self, system, buffer_capacity: int = 512, cancel_event: Optional[threading.Event] = None):
        if buffer_capacity <= 0:
            raise ValueError(f"buffer_capacity must be positive, got {buffer_capacity}")
        self.system = system
        self.buffer_capacity = buffer_capacity
        self.cancel_event = cancel_event if cancel_event is not None else threading.Event()

        self._buffer: "queue.Queue[SystemSnapshot]" = queue.Queue()
        self._slots = threading.Semaphore(buffer_capacity)
        self._completed = threading.Event()
        self._failure: Optional[BaseException] = None
        self._thread = threading.Thread(target=self._produce, name="nbody-producer", daemon=True)

        self.error: Optional[StepSizeUnderflowError] = None
        self.produced = 0
        self.consumed = 0

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    @property
    def done(self) -> bool:
        """True once the producer has stopped."""
        return self._completed.is_set()

    def start(self) -> "SnapshotStream":
        self._thread.start()
        return self

    def cancel(self):
        """Ask the producer to stop; safe to call any number of times."""
        self.cancel_event.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the producer to stop. Returns True if it has."""
        if self._thread.is_alive():
            self._thread.join(timeout)
        return self._completed.is_set()

    def _reserve_slot(self) -> bool:
        while not self.cancel_event.is_set():
            if self._slots.acquire(timeout=self.POLL_INTERVAL):
                return True
        return False

    def _produce(self):
        try:
            while not self.cancel_event.is_set():
                if not self._reserve_slot():
                    break
                try:
                    self.system.step()
                except StepSizeUnderflowError as exc:
                    self.error = exc
                    warnings.warn(f"Snapshot stream stopped: {exc}", RuntimeWarning)
                    break
                self._buffer.put(self.system.get_snapshot())
                self.produced += 1
        except Exception as exc:
            # Handed to the consumer once the buffered snapshots run out
            self._failure = exc
        finally:
            self._completed.set()

    def __iter__(self):
        return self

    def __next__(self) -> SystemSnapshot:
        while True:
            if self.cancel_event.is_set():
                raise StopIteration
            try:
                snapshot = self._buffer.get(timeout=self.POLL_INTERVAL)
            except queue.Empty:
                if self._completed.is_set() and self._buffer.empty():
                    failure, self._failure = self._failure, None
                    if failure is not None:
                        raise failure
                    raise StopIteration
                continue
            self._slots.release()
            self.consumed += 1
            return snapshot

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cancel()
        self.join()
