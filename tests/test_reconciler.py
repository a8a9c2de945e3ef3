"""Edit reconciler tests on a real QTextDocument."""

import pytest
import shiboken6
from PySide6.QtGui import QTextCursor, QTextDocument

from prompt_edit.core.edit import APPLY_HINT, EditReconciler, TrackedRegion
from prompt_edit.core.errors import ApplyPreconditionError


class FakeHost:
    def __init__(self, answer=True):
        self.answer = answer
        self.panel = None
        self.prompts = []
        self.replacements = []

    def replace_tracked_region(self, region, new_text):
        self.replacements.append(new_text)
        region.replace(new_text)

    def show_panel(self, text):
        self.panel = text

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def document(qapp):
    return QTextDocument("header\nx = 1\nfooter\n")


def region_over(document, needle):
    start = document.toPlainText().index(needle)
    return TrackedRegion(document, start, start + len(needle))


RESPONSE = "Try this:\n```python\nx = 2\n```\n"


def test_region_follows_edits_before_it(document):
    region = region_over(document, "x = 1")
    cursor = document.find("header")
    cursor.insertText("a much longer header")
    assert region.text() == "x = 1"


def test_review_then_apply(document, slot):
    host = FakeHost()
    reconciler = EditReconciler(host, slot=slot)
    region = region_over(document, "x = 1")

    code = reconciler.review_then_apply(RESPONSE, region)
    assert code == "x = 2"
    assert host.panel.startswith(APPLY_HINT)
    assert RESPONSE in host.panel
    assert slot.pending.code == "x = 2"
    assert document.toPlainText() == "header\nx = 1\nfooter\n"

    document.find("header").insertText("HEADER!")
    reconciler.apply_pending()
    assert document.toPlainText() == "HEADER!\nx = 2\nfooter\n"
    assert slot.pending is None
    assert region.released


def test_apply_without_pending_raises_and_does_not_edit(document, slot):
    host = FakeHost()
    reconciler = EditReconciler(host, slot=slot)
    with pytest.raises(ApplyPreconditionError):
        reconciler.apply_pending()
    assert host.replacements == []
    assert document.toPlainText() == "header\nx = 1\nfooter\n"


def test_apply_after_document_is_gone(qapp, slot):
    host = FakeHost()
    reconciler = EditReconciler(host, slot=slot)
    document = QTextDocument("x = 1")
    reconciler.review_then_apply(RESPONSE, TrackedRegion(document, 0, 5))
    region = slot.pending.region
    shiboken6.delete(document)
    with pytest.raises(ApplyPreconditionError):
        reconciler.apply_pending()
    assert host.replacements == []
    assert slot.pending is None
    assert region.released


def test_newer_review_replaces_pending(document, slot):
    reconciler = EditReconciler(FakeHost(), slot=slot)
    first = region_over(document, "header")
    second = region_over(document, "footer")
    reconciler.review_then_apply("```\nA\n```", first)
    reconciler.review_then_apply("```\nB\n```", second)
    assert first.released
    reconciler.apply_pending()
    assert document.toPlainText() == "header\nx = 1\nB\n"


def test_confirm_then_apply_yes(document, slot):
    host = FakeHost(answer=True)
    reconciler = EditReconciler(host, slot=slot)
    region = region_over(document, "x = 1")
    assert reconciler.confirm_then_apply(RESPONSE, region) is True
    assert document.toPlainText() == "header\nx = 2\nfooter\n"
    assert host.panel is None
    assert slot.pending is None
    assert region.released


def test_confirm_then_apply_no_shows_response(document, slot):
    host = FakeHost(answer=False)
    reconciler = EditReconciler(host, slot=slot)
    region = region_over(document, "x = 1")
    assert reconciler.confirm_then_apply(RESPONSE, region) is False
    assert host.panel == RESPONSE
    assert document.toPlainText() == "header\nx = 1\nfooter\n"
    assert slot.pending is None
    assert region.released


def test_text_typed_after_region_survives_apply(qapp, slot):
    document = QTextDocument("a = 1\nb = 1\n")
    reconciler = EditReconciler(FakeHost(), slot=slot)
    region = TrackedRegion(document, 6, 11)
    reconciler.review_then_apply("```\nb = 2\n```", region)

    cursor = QTextCursor(document)
    cursor.setPosition(11)
    cursor.insertText("  # keep me")
    assert region.text() == "b = 1"

    reconciler.apply_pending()
    assert document.toPlainText() == "a = 1\nb = 2  # keep me\n"


def test_text_typed_before_region_stays_outside(document):
    region = region_over(document, "x = 1")
    cursor = QTextCursor(document)
    cursor.setPosition(region.start)
    cursor.insertText("# note\n")
    assert region.text() == "x = 1"


def test_replace_keeps_region_over_new_text(document):
    region = region_over(document, "x = 1")
    region.replace("x = 22")
    assert region.text() == "x = 22"
    assert document.toPlainText() == "header\nx = 22\nfooter\n"
