"""
Terminal Input
==============

Blocking key source for the driver's input thread. Reads raw bytes from the
terminal file descriptor, so it never calls into curses while the main thread
is drawing.

Keys: Space opens the mouth; Esc or q quits; everything else is ignored.
Escape sequences (arrow and function keys) count as a single ignored event;
an Esc byte that does not start one is the Esc key.
"""

from __future__ import annotations

import os
import select
import sys
import threading
from typing import Iterator, List, Optional

from dog_pacman.pacman_core.driver import InputSource
from dog_pacman.pacman_core.input_controller import InputEvent

ESC = 0x1B
SPACE = 0x20
QUIT_KEYS = (ord("q"),)

# CSI ("[") and SS3 ("O") introduce the sequences sent by arrow and function keys
SEQUENCE_INTRODUCERS = (ord("["), ord("O"))
SEQUENCE_FINAL = range(0x40, 0x7F)

READ_SIZE = 32
POLL_INTERVAL = 0.1


def _sequence_end(chunk: bytes, start: int) -> Optional[int]:
    """
    End index of the escape sequence starting at chunk[start].

    Returns None when the Esc byte is not followed by a sequence introducer,
    i.e. it is a lone Esc key press.
    """
    if start + 1 >= len(chunk) or chunk[start + 1] not in SEQUENCE_INTRODUCERS:
        return None
    for i in range(start + 2, len(chunk)):
        if chunk[i] in SEQUENCE_FINAL:
            return i + 1
    return len(chunk)


def classify_keys(chunk: bytes) -> List[InputEvent]:
    """
    Classify one read from the terminal into input events.

    Args:
        chunk: Bytes returned by a single read.

    Returns:
        One event per key, in order. An escape sequence is one OTHER event;
        any other Esc byte quits.
    """
    events = []
    i = 0
    while i < len(chunk):
        byte = chunk[i]
        if byte == ESC:
            end = _sequence_end(chunk, i)
            if end is None:
                events.append(InputEvent.quit())
                i += 1
            else:
                events.append(InputEvent.other(chunk[i:end].decode("latin-1")))
                i = end
            continue

        if byte == SPACE:
            events.append(InputEvent.open_mouth())
        elif byte in QUIT_KEYS:
            events.append(InputEvent.quit())
        else:
            events.append(InputEvent.other(chr(byte)))
        i += 1
    return events


class TerminalKeySource(InputSource):
    """
    Yields InputEvents from a terminal file descriptor.

    Iteration blocks until a key arrives. close() makes the iterator finish
    within one poll interval.
    """

    def __init__(self, fd: Optional[int] = None, poll_interval: float = POLL_INTERVAL):
        self._fd = fd if fd is not None else sys.stdin.fileno()
        self._poll_interval = poll_interval
        self._closed = threading.Event()

    def __iter__(self) -> Iterator[InputEvent]:
        while not self._closed.is_set():
            readable, _, _ = select.select([self._fd], [], [], self._poll_interval)
            if not readable:
                continue
            chunk = os.read(self._fd, READ_SIZE)
            if not chunk:
                # End of input
                return
            for event in classify_keys(chunk):
                yield event

    def close(self) -> None:
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()
