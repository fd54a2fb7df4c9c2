"""Segmentation of a stream of MIDI note on/off messages into chords."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Optional

DEFAULT_SEGMENTATION_WINDOW_MS = 60.0
DEFAULT_EXTENSION_PERIOD_MS = 30.0


class State(IntEnum):
    """Segmentation state reported alongside each change."""

    SEGMENT_END = 0
    SEGMENT_START = 1
    ONGOING_SEGMENT = 2
    SEGMENT_EXTENSION = 3


STATE_TRANSLATION = (
    "0: segment end, 1: segment start, 2: ongoing segment, 3: segment extension"
)


@dataclass
class ChordAndState:
    """Currently held notes together with the segmentation state."""

    notes: list[int] = field(default_factory=list)
    state: State = State.SEGMENT_END


class HeldNotes:
    """A sorted set of held note numbers without duplicates."""

    def __init__(self) -> None:
        self._notes: set[int] = set()

    def bind(self, note: int) -> bool:
        """Hold ``note``; return True if it was not already held."""
        if note in self._notes:
            return False
        self._notes.add(note)
        return True

    def release(self, note: int) -> None:
        """Release ``note`` if it is held."""
        self._notes.discard(note)

    def held(self) -> list[int]:
        """Return the held notes in ascending order."""
        return sorted(self._notes)

    def flush(self) -> list[int]:
        """Release every note and return those that were held."""
        flushed = self.held()
        self._notes.clear()
        return flushed

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note: object) -> bool:
        return note in self._notes


class MidiNoteSegmenter:
    """Groups note events that arrive within a time window into chords."""

    def __init__(
        self,
        segmentation_window_ms: float = DEFAULT_SEGMENTATION_WINDOW_MS,
        extension_period_ms: float = DEFAULT_EXTENSION_PERIOD_MS,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._segmentation_window_ms = max(0.0, float(segmentation_window_ms))
        self._extension_period_ms = max(0.0, float(extension_period_ms))
        self._held = HeldNotes()
        self._remaining_window = 0.0
        self._last_timestamp: Optional[float] = None

    @property
    def segmentation_window_ms(self) -> float:
        return self._segmentation_window_ms

    @segmentation_window_ms.setter
    def segmentation_window_ms(self, value: float) -> None:
        self._segmentation_window_ms = max(0.0, float(value))

    @property
    def extension_period_ms(self) -> float:
        return self._extension_period_ms

    @extension_period_ms.setter
    def extension_period_ms(self, value: float) -> None:
        self._extension_period_ms = max(0.0, float(value))

    def poll(self) -> Optional[list[int]]:
        """Return the held notes when the current window ends, otherwise None."""
        if not self.has_ongoing_window():
            return None

        now = self._clock()
        elapsed_ms = (now - self._last_timestamp) * 1000.0
        self._remaining_window -= elapsed_ms
        self._last_timestamp = now

        if self._remaining_window <= 0.0:
            self._terminate_window()
            return self._held.held()
        return None

    def process_input(self, note: int, velocity: int) -> Optional[ChordAndState]:
        """Register a note on (velocity > 0) or off; return the new state on change."""
        if velocity > 0:
            changed = self._held.bind(note)
        else:
            before = self._held.held()
            self._held.release(note)
            changed = before != self._held.held()

        if changed:
            state = self._update_state_on_input()
            return ChordAndState(self._held.held(), state)
        return None

    def flush(self) -> bool:
        """End any window and release all notes; return True if any were held."""
        self._terminate_window()
        return bool(self._held.flush())

    def has_ongoing_window(self) -> bool:
        return self._remaining_window > 0.0

    def _extend_window(self) -> bool:
        if self._remaining_window < self._extension_period_ms:
            self._remaining_window = self._extension_period_ms
            return True
        return False

    def _update_state_on_input(self) -> State:
        if self.has_ongoing_window():
            return State.SEGMENT_EXTENSION if self._extend_window() else State.ONGOING_SEGMENT
        self._new_window()
        return State.SEGMENT_START

    def _new_window(self) -> None:
        self._remaining_window = self._segmentation_window_ms
        self._last_timestamp = self._clock()

    def _terminate_window(self) -> None:
        self._remaining_window = 0.0
        self._last_timestamp = None


def _to_note_values(values: Iterable[object]) -> list[int]:
    result = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {value!r}")
        result.append(int(value))
    return result


class ChordThresh:
    """Thread-safe front end to a segmenter, fed with (note, velocity[, channel]) lists."""

    def __init__(self, segmenter: Optional[MidiNoteSegmenter] = None) -> None:
        self.segmenter = segmenter if segmenter is not None else MidiNoteSegmenter()
        self._lock = threading.Lock()

    def handle_list(self, values: Iterable[object]) -> Optional[ChordAndState]:
        """Process one note message; return raw held notes and state on change.

        A third value (the channel) is accepted and ignored.
        """
        notes = _to_note_values(values)
        if len(notes) not in (2, 3):
            raise ValueError("bad input format")
        with self._lock:
            return self.segmenter.process_input(notes[0], notes[1])

    def tick(self) -> Optional[ChordAndState]:
        """Poll the segmenter; at the end of a window return the segmented chord.

        The returned notes may be empty if every note was released during the window.
        """
        with self._lock:
            chord = self.segmenter.poll()
        if chord is None:
            return None
        return ChordAndState(chord, State.SEGMENT_END)

    def flush(self) -> bool:
        """Release all held notes; return True if anything was flushed."""
        with self._lock:
            return self.segmenter.flush()