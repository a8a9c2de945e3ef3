"""Main application coordinator (no widgets; talks to the editor through EditorHost)"""
import logging
from typing import Callable, Iterable, Optional

from prompt_edit.common.models import ContentResult, ErrorResult, Message, Result
from prompt_edit.core import prompts
from prompt_edit.core.agents.base_agent import BaseAgent
from prompt_edit.core.agents.stdio_agent import StdioAgent
from prompt_edit.core.client import AssistantClient
from prompt_edit.core.config import Config
from prompt_edit.core.edit import EditReconciler, TrackedRegion
from prompt_edit.core.editor_host import EditorHost, PanelSink
from prompt_edit.core.errors import ApplyPreconditionError
from prompt_edit.core.features import BaseFeature, default_features

logger = logging.getLogger(__name__)

NO_SELECTION = "Select a region first"


class App:
    """Command handlers wiring the editor, the client and the reconciler"""

    def __init__(
        self,
        host: EditorHost,
        config: Optional[Config] = None,
        client: Optional[AssistantClient] = None,
        reconciler: Optional[EditReconciler] = None,
    ):
        self.host = host
        self.config = config or Config()
        self.agent: BaseAgent = client.agent if client else self._create_agent()
        self.client = client or AssistantClient(
            self.agent,
            sink=PanelSink(host),
            stream=bool(self.config["stream"]),
        )
        self.reconciler = reconciler or EditReconciler(host)
        self.features: dict[str, BaseFeature] = {f.name: f for f in default_features()}
        # Region captured for the request in flight; released if it is superseded.
        self._inflight_region: Optional[TrackedRegion] = None

    def _create_agent(self) -> BaseAgent:
        """Instantiate the configured tool."""
        return StdioAgent(
            executable=self.config["executable"],
            provider=self.config["provider"],
            model=self.config["model"],
            extra_args=self.config.get("extra_args") or [],
            extra_env=self.config.get("forward_env") or [],
        )

    def run_feature(self, name: str, prompt: str = "") -> str:
        """Execute a command by name and return its status message."""
        feature = self.features.get(name)
        if feature is None:
            raise ValueError(f"Unknown command: {name}")
        return feature.execute(self, prompt)

    # -- Commands -------------------------------------------------------------

    def ask(self, question: str) -> str:
        code = None
        selection = self.host.get_selected_range()
        if selection is not None:
            code, region = selection
            region.release()
        messages = prompts.build_ask_messages(
            question, code, self.host.get_current_language_tag()
        )
        failure = self._send(messages, self._show_result)
        return failure or f"Asking {self.agent.name}..."

    def explain(self) -> str:
        selection = self.host.get_selected_range()
        if selection is None:
            return NO_SELECTION
        code, region = selection
        region.release()
        messages = prompts.build_explain_messages(code, self.host.get_current_language_tag())
        failure = self._send(messages, self._show_result)
        return failure or f"Explaining with {self.agent.name}..."

    def refactor(self, instruction: str = "") -> str:
        selection = self.host.get_selected_range()
        if selection is None:
            return NO_SELECTION
        code, region = selection
        messages = prompts.build_refactor_messages(
            code, self.host.get_current_language_tag(), instruction
        )

        def on_content(result: ContentResult) -> None:
            self.reconciler.review_then_apply(result.text, region)
            self.host.show_message("Review the proposed code, then apply it")

        failure = self._send(messages, on_content, region=region, stream=False)
        return failure or f"Refactoring with {self.agent.name}..."

    def fix(self) -> str:
        selection = self.host.get_selected_range()
        if selection is None:
            return NO_SELECTION
        code, region = selection
        messages = prompts.build_fix_messages(code, self.host.get_current_language_tag())

        def on_content(result: ContentResult) -> None:
            try:
                applied = self.reconciler.confirm_then_apply(result.text, region)
            except ApplyPreconditionError as e:
                self.host.show_message(str(e))
                return
            self.host.show_message("Fix applied" if applied else "Fix not applied")

        failure = self._send(messages, on_content, region=region, stream=False)
        return failure or f"Fixing with {self.agent.name}..."

    def apply_pending(self) -> str:
        try:
            self.reconciler.apply_pending()
        except ApplyPreconditionError as e:
            return str(e)
        return "Applied pending code"

    def cancel(self) -> str:
        cancelled = self.client.cancel()
        self._release_inflight()
        return "Request cancelled" if cancelled else "No request in flight"

    # -- Plumbing -------------------------------------------------------------

    def _send(
        self,
        messages: Iterable[Message],
        on_content: Callable[[ContentResult], None],
        region: Optional[TrackedRegion] = None,
        stream: Optional[bool] = None,
    ) -> Optional[str]:
        """Start a request. Returns the failure message if it failed before spawning."""
        self._release_inflight()
        self._inflight_region = region
        failures: list[str] = []

        def on_result(result: Result) -> None:
            if self._inflight_region is region:
                self._inflight_region = None
            if isinstance(result, ErrorResult):
                if region is not None:
                    region.release()
                message = f"Request failed: {result.message}"
                logger.info("%s", message)
                failures.append(message)
                self.host.show_message(message)
                return
            on_content(result)

        self.client.send(messages, on_result, stream=stream)
        return failures[0] if failures else None

    def _show_result(self, result: ContentResult) -> None:
        if not result.was_streamed:
            self.host.show_panel(result.text)
        self.host.show_message("Done")

    def _release_inflight(self) -> None:
        region, self._inflight_region = self._inflight_region, None
        if region is not None:
            region.release()
