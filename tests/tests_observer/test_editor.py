from unittest.mock import MagicMock

import pytest

from common.config import EventType
from common.patterns import EventListener
from observer.editor import Editor, NoFileOpenError


@pytest.fixture
def test_editor():
    editor = Editor()
    editor.logger = MagicMock()
    yield editor


def test_initialization(test_editor):
    assert test_editor.file is None
    assert test_editor.events.listeners(EventType.OPEN) == ()
    assert test_editor.events.listeners(EventType.SAVE) == ()


def test_open_file_records_file_and_notifies(test_editor):
    listener = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.OPEN, listener)

    test_editor.open_file("test.txt")

    assert test_editor.file == "test.txt"
    listener.update.assert_called_once_with(EventType.OPEN, "test.txt")
    test_editor.logger.log.assert_called_with("Opened test.txt")


def test_open_then_save_scenario(test_editor):
    open_listener = MagicMock(spec=EventListener)
    save_listener = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.OPEN, open_listener)
    test_editor.events.subscribe(EventType.SAVE, save_listener)

    test_editor.open_file("test.txt")
    open_listener.update.assert_called_once_with(EventType.OPEN, "test.txt")
    save_listener.update.assert_not_called()

    test_editor.save_file()
    save_listener.update.assert_called_once_with(EventType.SAVE, "test.txt")
    open_listener.update.assert_called_once()


def test_save_uses_latest_opened_file(test_editor):
    save_listener = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.SAVE, save_listener)

    test_editor.open_file("first.txt")
    test_editor.open_file("second.txt")
    test_editor.save_file()

    save_listener.update.assert_called_once_with(EventType.SAVE, "second.txt")


def test_save_before_open_raises(test_editor):
    save_listener = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.SAVE, save_listener)

    with pytest.raises(NoFileOpenError):
        test_editor.save_file()

    save_listener.update.assert_not_called()


def test_open_file_propagates_listener_failure(test_editor):
    failing = MagicMock(spec=EventListener)
    failing.update.side_effect = RuntimeError("boom")
    skipped = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.OPEN, failing)
    test_editor.events.subscribe(EventType.OPEN, skipped)

    with pytest.raises(RuntimeError, match="boom"):
        test_editor.open_file("test.txt")

    assert test_editor.file == "test.txt"
    skipped.update.assert_not_called()


def test_unsubscribed_listener_not_notified_on_save(test_editor):
    listener = MagicMock(spec=EventListener)
    test_editor.events.subscribe(EventType.SAVE, listener)
    test_editor.events.unsubscribe(EventType.SAVE, listener)

    test_editor.open_file("test.txt")
    test_editor.save_file()

    listener.update.assert_not_called()
