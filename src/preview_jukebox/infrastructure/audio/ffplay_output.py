"""
FFplay Audio Output

Infrastructure component that plays preview sources through ffplay and
probes their duration with ffprobe.
"""

from __future__ import annotations

import asyncio
import logging
import math
import signal
from enum import Enum

from preview_jukebox.application.interfaces.audio_output import (
    AudioOutput,
    OnEndedCallback,
    OnProgressCallback,
)
from preview_jukebox.config.settings import AudioSettings
from preview_jukebox.domain.shared.exceptions import PlaybackStartRejectedError
from preview_jukebox.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class PlayerState(Enum):
    """States for the ffplay output."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class FfplayAudioOutput(AudioOutput):
    """Audio output backed by one ffplay subprocess at a time.

    Completion is reported only when the current process exits with status 0.
    A process that is replaced or stopped is forgotten first, so its exit is
    never mistaken for a finished track. Position is derived from wall-clock
    time since start, excluding time spent paused.
    """

    def __init__(self, settings: AudioSettings | None = None) -> None:
        self._settings = settings or AudioSettings()

        self._process: asyncio.subprocess.Process | None = None
        self._watcher: asyncio.Task[None] | None = None
        self._ticker: asyncio.Task[None] | None = None
        self._state = PlayerState.IDLE

        self._duration: float | None = None
        self._started_at = 0.0
        self._paused_at: float | None = None
        self._paused_total = 0.0

        self._on_ended: OnEndedCallback | None = None
        self._on_progress: OnProgressCallback | None = None

    # === Callbacks ===

    def set_on_ended_callback(self, callback: OnEndedCallback) -> None:
        self._on_ended = callback

    def set_on_progress_callback(self, callback: OnProgressCallback) -> None:
        self._on_progress = callback

    # === State ===

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def duration(self) -> float | None:
        return self._duration

    @property
    def position(self) -> float:
        """Seconds played of the current source."""
        if self._state is PlayerState.IDLE:
            return 0.0
        now = self._paused_at if self._paused_at is not None else self._now()
        elapsed = max(0.0, now - self._started_at - self._paused_total)
        if self._duration is not None:
            return min(elapsed, self._duration)
        return elapsed

    def _now(self) -> float:
        return asyncio.get_running_loop().time()

    # === Transport ===

    async def play(self, source_ref: str) -> None:
        await self.stop()

        if not source_ref.strip():
            raise PlaybackStartRejectedError(source_ref, ErrorMessages.EMPTY_SOURCE_REF)

        self._duration = await self._probe_duration(source_ref)
        binary = self._settings.player_binary

        try:
            process = await asyncio.create_subprocess_exec(
                binary,
                "-nodisp",
                "-autoexit",
                "-loglevel",
                "error",
                "-i",
                source_ref,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except FileNotFoundError as e:
            raise PlaybackStartRejectedError(
                source_ref, ErrorMessages.PLAYER_NOT_FOUND.format(binary=binary)
            ) from e
        except (OSError, ValueError) as e:
            raise PlaybackStartRejectedError(
                source_ref, ErrorMessages.PLAYER_START_FAILED.format(binary=binary, error=e)
            ) from e

        logger.debug(LogTemplates.PLAYER_SPAWNED, binary, process.pid, source_ref)

        self._process = process
        self._state = PlayerState.PLAYING
        self._started_at = self._now()
        self._paused_at = None
        self._paused_total = 0.0

        loop = asyncio.get_running_loop()
        self._watcher = loop.create_task(self._watch(process))
        self._ticker = loop.create_task(self._tick(process))

    async def pause(self) -> None:
        if self._process is None or self._state is not PlayerState.PLAYING:
            return
        try:
            self._process.send_signal(signal.SIGSTOP)
        except ProcessLookupError:
            return
        self._paused_at = self._now()
        self._state = PlayerState.PAUSED

    async def resume(self) -> None:
        if self._process is None or self._state is not PlayerState.PAUSED:
            return
        try:
            self._process.send_signal(signal.SIGCONT)
        except ProcessLookupError:
            return
        if self._paused_at is not None:
            self._paused_total += self._now() - self._paused_at
        self._paused_at = None
        self._state = PlayerState.PLAYING

    async def stop(self) -> None:
        process = self._process
        was_paused = self._state is PlayerState.PAUSED
        self._process = None
        self._state = PlayerState.IDLE
        self._paused_at = None

        current = asyncio.current_task()
        tasks = [
            task
            for task in (self._ticker, self._watcher)
            if task is not None and task is not current and not task.done()
        ]
        self._ticker = None
        self._watcher = None
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        if process is None or process.returncode is not None:
            return
        try:
            if was_paused:
                process.send_signal(signal.SIGCONT)
            process.terminate()
            await process.wait()
        except ProcessLookupError:
            logger.debug(LogTemplates.PLAYER_STOP_ERROR)

    # === Background tasks ===

    async def _watch(self, process: asyncio.subprocess.Process) -> None:
        returncode = await process.wait()
        logger.debug(LogTemplates.PLAYER_EXITED, returncode)

        if process is not self._process:
            logger.debug(LogTemplates.PLAYER_SUPERSEDED)
            return

        # The ended callback usually starts the next source, which calls stop();
        # detach this task first so stop() does not cancel it.
        self._watcher = None
        ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.cancel()
        self._process = None
        self._state = PlayerState.IDLE

        if returncode != 0:
            logger.warning(LogTemplates.PLAYER_FAILED, returncode)
            return

        if self._on_ended is not None:
            await self._on_ended()

    async def _tick(self, process: asyncio.subprocess.Process) -> None:
        interval = self._settings.progress_interval_s
        while True:
            await asyncio.sleep(interval)
            if process is not self._process:
                return
            if self._state is PlayerState.PAUSED or self._on_progress is None:
                continue
            await self._on_progress(self.position, self._duration)

    async def _probe_duration(self, source_ref: str) -> float | None:
        try:
            probe = await asyncio.create_subprocess_exec(
                self._settings.probe_binary,
                "-v",
                "error",
                "-show_entries",
                "format=duration",
                "-of",
                "default=noprint_wrappers=1:nokey=1",
                "-i",
                source_ref,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
            stdout, _ = await probe.communicate()
        except (OSError, ValueError) as e:
            logger.debug(LogTemplates.PROBE_FAILED, source_ref, e)
            return None

        if probe.returncode != 0:
            logger.debug(LogTemplates.PROBE_FAILED, source_ref, f"exit status {probe.returncode}")
            return None

        try:
            duration = float(stdout.decode().strip())
        except ValueError:
            logger.debug(LogTemplates.PROBE_FAILED, source_ref, "unparseable output")
            return None

        if not math.isfinite(duration) or duration <= 0:
            return None
        return duration
