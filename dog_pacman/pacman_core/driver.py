"""
Game Driver
===========

Runs the fixed-rate tick loop concurrently with input polling.

Two daemon threads feed one bounded queue:

- FrameTicker puts a tick every frame period.
- InputPump iterates a blocking input source and puts each event.

The driver's loop takes one item at a time on the calling thread, so the game
is only ever mutated from there. The loop ends when lives reach zero or the
input controller signals quit; the final score then goes to the game-over
callback.

Usage:
    game = CoreGame(config, seed=42)
    driver = GameDriver(game, renderer=renderer, input_source=keys,
                        on_game_over=show_game_over)
    final_score = driver.run()
"""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional, Any

from dog_pacman.pacman_core.game import CoreGame
from dog_pacman.pacman_core.input_controller import InputController, InputEvent
from dog_pacman.pacman_core.state_snapshot import GameSnapshot

# Seconds a producer waits on a full queue before re-checking its stop flag
PRODUCER_POLL_INTERVAL = 0.05


class LoopEventKind(Enum):
    TICK = "tick"
    INPUT = "input"


@dataclass(frozen=True)
class LoopEvent:
    """One item on the driver's queue."""
    kind: LoopEventKind
    input_event: Optional[InputEvent] = None


class InputSource:
    """
    Blocking, infinite sequence of input events.

    Subclasses yield InputEvents from __iter__ and may implement close() so
    the driver can release the underlying device when the loop ends.
    """

    def __iter__(self) -> Iterator[InputEvent]:
        raise NotImplementedError

    def close(self) -> None:
        """Ask the source to stop producing events."""


class _Producer:
    """Base for the two background producers."""

    def __init__(self, sink: queue.Queue, name: str):
        self._sink = sink
        self._name = name
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start producer in background thread (non-blocking)."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 2.0) -> None:
        """Signal the producer to stop and wait briefly for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _put(self, item: LoopEvent) -> bool:
        """Put an item, giving up only if asked to stop."""
        while not self._stop_event.is_set():
            try:
                self._sink.put(item, timeout=PRODUCER_POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def _run(self) -> None:
        raise NotImplementedError


class FrameTicker(_Producer):
    """
    Emits a tick every `period` seconds.

    Deadlines are absolute, so the cadence does not drift. If the consumer
    falls behind, missed ticks are dropped rather than delivered in a burst.
    """

    def __init__(self, period: float, sink: queue.Queue):
        super().__init__(sink, name="frame-ticker")
        self._period = period
        self._ticks_sent: int = 0

    @property
    def ticks_sent(self) -> int:
        return self._ticks_sent

    def _run(self) -> None:
        next_deadline = time.monotonic() + self._period
        while not self._stop_event.is_set():
            delay = next_deadline - time.monotonic()
            if delay > 0 and self._stop_event.wait(delay):
                break

            if not self._put(LoopEvent(LoopEventKind.TICK)):
                break
            self._ticks_sent += 1

            next_deadline += self._period
            now = time.monotonic()
            if next_deadline < now:
                next_deadline = now + self._period


class InputPump(_Producer):
    """Forwards events from a blocking input source to the queue."""

    def __init__(self, source: Iterable[InputEvent], sink: queue.Queue):
        super().__init__(sink, name="input-pump")
        self._source = source

    def stop(self, timeout: float = 2.0) -> None:
        self._stop_event.set()
        if isinstance(self._source, InputSource):
            self._source.close()
        # The source may be blocked in a read; do not wait long for it
        super().stop(timeout=min(timeout, PRODUCER_POLL_INTERVAL * 4))

    def _run(self) -> None:
        for event in self._source:
            if self._stop_event.is_set():
                break
            if not self._put(LoopEvent(LoopEventKind.INPUT, event)):
                break


class GameDriver:
    """
    Owns the run loop for one game.

    Renderer: any object with render(snapshot), called after every tick.
    Input source: blocking iterable of InputEvents.
    on_game_over: called with the final score after the loop exits.
    """

    def __init__(
        self,
        game: CoreGame,
        renderer: Optional[Any] = None,
        input_source: Optional[Iterable[InputEvent]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
        frame_period: Optional[float] = None,
        queue_size: int = 64
    ):
        """
        Initialize driver.

        Args:
            game: Game to drive. Must not be mutated elsewhere while running.
            renderer: Object with render(GameSnapshot). None for headless.
            input_source: Iterable of InputEvents. None for no input.
            on_game_over: Callback receiving the final score.
            frame_period: Seconds per tick. Uses the game's config if None.
            queue_size: Capacity of the event queue.
        """
        self._game = game
        self._renderer = renderer
        self._input_source = input_source if input_source is not None else ()
        self._on_game_over = on_game_over
        self._frame_period = frame_period if frame_period is not None else game.config.frame_period
        self._queue_size = queue_size
        self._controller = InputController(game)

        self._ticks_processed: int = 0
        self._inputs_processed: int = 0
        self._quit_requested: bool = False

    @property
    def ticks_processed(self) -> int:
        return self._ticks_processed

    @property
    def inputs_processed(self) -> int:
        return self._inputs_processed

    @property
    def quit_requested(self) -> bool:
        """True if the loop ended because of a quit input."""
        return self._quit_requested

    def run(self) -> int:
        """
        Run until game over or quit.

        Returns:
            Final score.
        """
        events: queue.Queue = queue.Queue(maxsize=self._queue_size)
        ticker = FrameTicker(self._frame_period, events)
        pump = InputPump(self._input_source, events)

        ticker.start()
        pump.start()
        try:
            self._loop(events)
        finally:
            ticker.stop()
            pump.stop()

        if self._on_game_over is not None:
            self._on_game_over(self._game.score)
        return self._game.score

    def _loop(self, events: queue.Queue) -> None:
        running = True
        while running and not self._game.is_over:
            item: LoopEvent = events.get()
            if item.kind is LoopEventKind.TICK:
                self._game.update()
                self._ticks_processed += 1
                self._render(self._game.snapshot())
            else:
                self._inputs_processed += 1
                running = self._controller.handle_input(item.input_event)
                if not running:
                    self._quit_requested = True

    def _render(self, snapshot: GameSnapshot) -> None:
        if self._renderer is not None:
            self._renderer.render(snapshot)
