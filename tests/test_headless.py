"""Tests for viewer.headless: the windowless display."""

import io

import pytest
from viewer import headless
from viewer.color import Color
from viewer.display import KEY_ESCAPE, KEY_RETURN, KEY_SPACE, DisplayError, key_up, quit_event


class BrokenStream:
    def readline(self):
        raise OSError('input/output error')


class TestHeadless:
    def test_reads_key_names(self):
        display = headless.create_display('colat', 400, 400, stream=io.StringIO('j\n\nK\n'))
        assert display.wait_for_event() == key_up('j')
        assert display.wait_for_event() == key_up('k')
        assert display.wait_for_event() == quit_event()

    def test_eof_is_quit(self):
        display = headless.create_display('colat', 400, 400, stream=io.StringIO(''))
        assert display.wait_for_event() == quit_event()

    def test_read_failure(self):
        display = headless.create_display('colat', 400, 400, stream=BrokenStream())
        with pytest.raises(DisplayError, match='input/output error'):
            display.wait_for_event()

    def test_paint_records_frames(self):
        display = headless.create_display('colat', 400, 400, stream=io.StringIO(''))
        display.paint(Color(1, 2, 3, 255))
        display.paint(Color(4, 5, 6, 255))
        assert display.color == Color(4, 5, 6, 255)
        assert display.frames == [Color(1, 2, 3, 255), Color(4, 5, 6, 255)]
        display.release()

    def test_defaults_to_stdin(self, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO('q\n'))
        display = headless.create_display('colat', 400, 400)
        assert display.wait_for_event() == key_up('q')

    def test_key_aliases(self):
        display = headless.create_display('colat', 400, 400, stream=io.StringIO('Enter\nESC\n  Space \n'))
        assert display.wait_for_event() == key_up(KEY_RETURN)
        assert display.wait_for_event() == key_up(KEY_ESCAPE)
        assert display.wait_for_event() == key_up(KEY_SPACE)
