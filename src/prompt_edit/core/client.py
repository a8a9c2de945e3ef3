"""Request dispatcher: at most one live tool process per client."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from PySide6.QtCore import QObject

from prompt_edit.common.models import ChatRequest, Message, Result
from prompt_edit.core.agents.base_agent import BaseAgent
from prompt_edit.core.editor_host import LiveDisplaySink
from prompt_edit.core.session import Continuation, ProcessSession

logger = logging.getLogger(__name__)

MessageLike = Union[Message, dict]


class AssistantClient(QObject):
    """Public entry point for talking to the external tool.

    Every ``send`` supersedes the previous request: its process is killed
    and its continuation is never called. The live-session slot is a plain
    attribute; it is only touched from the Qt event loop thread.
    """

    def __init__(
        self,
        agent: BaseAgent,
        sink: Optional[LiveDisplaySink] = None,
        stream: bool = False,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.agent = agent
        self.sink = sink
        self.stream = stream
        self._live_session: Optional[ProcessSession] = None

    @property
    def is_busy(self) -> bool:
        return self._live_session is not None

    def send(
        self,
        messages: Iterable[MessageLike],
        callback: Continuation,
        stream: Optional[bool] = None,
    ) -> ProcessSession:
        """Start a request; ``callback`` receives exactly one Result.

        A missing executable is reported through ``callback`` like any other
        failure, before this method returns.
        """
        if stream is None:
            stream = self.stream
        stream = stream and self.sink is not None
        request = ChatRequest(
            messages=tuple(m if isinstance(m, Message) else Message(**m) for m in messages),
            stream=stream,
        )

        self.cancel()

        def on_result(result: Result) -> None:
            if self._live_session is session:
                self._live_session = None
            callback(result)

        session = ProcessSession(
            self.agent,
            request,
            on_result,
            sink=self.sink.append if stream else None,
            parent=self,
        )
        self._live_session = session
        if stream and session.resolved:
            self.sink.prepare()
        session.start()
        return session

    def cancel(self) -> bool:
        """Kill the in-flight request, if any. Its continuation will not fire."""
        session, self._live_session = self._live_session, None
        if session is None or not session.is_live:
            return False
        logger.info("Superseding in-flight request to %s", self.agent.name)
        session.terminate()
        return True
