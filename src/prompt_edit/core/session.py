"""One external-process exchange: spawn, write the request, read frames, reap.

All I/O arrives through QProcess signals on the Qt event loop, so the
handlers below never run concurrently with each other.
"""
from __future__ import annotations

import codecs
import logging
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

from PySide6.QtCore import QObject, QProcess, QProcessEnvironment

from prompt_edit.common.models import ChatRequest, ContentResult, ErrorResult, Result
from prompt_edit.core.agents.base_agent import BaseAgent
from prompt_edit.core.errors import ExecutableNotFoundError
from prompt_edit.core.protocol import FrameParser, ResponseAccumulator

logger = logging.getLogger(__name__)

Continuation = Callable[[Result], None]


@dataclass
class SessionState:
    """Mutable state owned by exactly one session; dropped once it resolves."""

    callback: Continuation
    accumulator: ResponseAccumulator
    parser: FrameParser = field(default_factory=FrameParser)
    stderr_decoder: codecs.IncrementalDecoder = field(
        default_factory=lambda: codecs.getincrementaldecoder("utf-8")(errors="replace")
    )

    @property
    def streaming(self) -> bool:
        return self.accumulator.streaming


class ProcessSession(QObject):
    """Owns one spawn of the external tool for one request.

    ``callback`` fires exactly once with the Result, unless the session is
    terminated first, in which case it never fires.
    """

    def __init__(
        self,
        agent: BaseAgent,
        request: ChatRequest,
        callback: Continuation,
        sink: Optional[Callable[[str], None]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._agent = agent
        self._request = request
        self._program = agent.resolve_program()
        self._process: Optional[QProcess] = None
        self._state: Optional[SessionState] = SessionState(
            callback=callback,
            accumulator=ResponseAccumulator(sink if request.stream else None),
        )

    @property
    def resolved(self) -> bool:
        return self._program is not None

    @property
    def is_live(self) -> bool:
        return self._state is not None

    @property
    def process(self) -> Optional[QProcess]:
        return self._process

    def start(self) -> bool:
        """Spawn the tool and write the request. False if nothing was spawned."""
        if self._state is None:
            raise RuntimeError("Session already finished or terminated")
        if self._program is None:
            error = ExecutableNotFoundError(self._agent.executable)
            logger.error("%s", error)
            self._resolve(ErrorResult(message=str(error)))
            return False

        process = QProcess(self)
        process.setProgram(self._program)
        process.setArguments(self._agent.arguments())
        env = QProcessEnvironment()
        for key, value in self._agent.environment().items():
            env.insert(key, value)
        process.setProcessEnvironment(env)
        if sys.platform == "win32":
            process.setCreateProcessArgumentsModifier(_hide_console_window)

        process.readyReadStandardOutput.connect(self._on_stdout)
        process.readyReadStandardError.connect(self._on_stderr)
        process.finished.connect(self._on_finished)
        process.errorOccurred.connect(self._on_error)
        self._process = process

        logger.debug("Spawning %s %s", self._program, " ".join(process.arguments()))
        process.start()
        process.write(self._request.to_wire())
        process.closeWriteChannel()
        return True

    def terminate(self) -> None:
        """Kill the process and drop all state; the callback will not fire."""
        if self._state is None:
            return
        self._state = None
        process = self._process
        if process is not None and process.state() != QProcess.ProcessState.NotRunning:
            logger.info("Killing superseded %s process (pid %s)", self._agent.name, process.processId())
            # Handlers ignore everything once the state is gone; the session
            # (and its QProcess child) is deleted after the kill is reaped.
            process.finished.connect(self.deleteLater)
            process.kill()
        else:
            self.deleteLater()

    # -- Process signals ------------------------------------------------------

    def _on_stdout(self) -> None:
        state = self._state
        if state is None or self._process is None:
            return
        chunk = self._process.readAllStandardOutput().data()
        state.accumulator.consume_all(state.parser.feed(chunk))

    def _on_stderr(self) -> None:
        state = self._state
        if state is None or self._process is None:
            return
        chunk = self._process.readAllStandardError().data()
        state.accumulator.append_error(state.stderr_decoder.decode(chunk))

    def _on_finished(self, exit_code: int, exit_status: QProcess.ExitStatus) -> None:
        state = self._state
        if state is None or self._process is None:
            return
        process = self._process

        # Stderr first, then whatever stdout is still buffered plus the tail.
        self._on_stderr()
        state.accumulator.append_error(state.stderr_decoder.decode(b"", final=True))
        process.readyReadStandardError.disconnect(self._on_stderr)
        self._on_stdout()
        state.accumulator.consume_all(state.parser.flush())

        error = state.accumulator.error
        if error:
            result: Result = ErrorResult(message=error.strip() or error)
        elif exit_status == QProcess.ExitStatus.NormalExit and exit_code == 0:
            result = ContentResult(text=state.accumulator.content, was_streamed=state.streaming)
        elif exit_status == QProcess.ExitStatus.CrashExit:
            result = ErrorResult(message=f"{self._agent.executable} crashed")
        else:
            result = ErrorResult(
                message=f"{self._agent.executable} exited abnormally with code {exit_code}"
            )
        self._resolve(result)
        self.deleteLater()

    def _on_error(self, error: QProcess.ProcessError) -> None:
        # Every other error is followed by finished().
        if error != QProcess.ProcessError.FailedToStart or self._state is None:
            return
        reason = self._process.errorString() if self._process is not None else ""
        logger.error("Failed to start %s: %s", self._program, reason)
        self._resolve(
            ErrorResult(message=f"{self._agent.executable} failed to start: {reason}")
        )
        self.deleteLater()

    def _resolve(self, result: Result) -> None:
        state = self._state
        if state is None:
            return
        self._state = None
        state.callback(result)


def _hide_console_window(args) -> None:
    """Keep Windows from flashing a console for the tool."""
    args.flags |= subprocess.CREATE_NO_WINDOW
