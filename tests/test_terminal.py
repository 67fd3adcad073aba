import io
import os
import termios

from consnake.terminal import CLEAR_SEQUENCE, clear_screen, raw_mode, read_key


def test_clear_screen_writes_escape_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[H\033[J"
    assert CLEAR_SEQUENCE == out.getvalue()


def test_read_key_from_pipe():
    r, w = os.pipe()
    try:
        with open(r, "rb", buffering=0) as reader:
            assert read_key(reader) is None
            os.write(w, b"dw")
            assert read_key(reader) == "d"
            assert read_key(reader) == "w"
            assert read_key(reader) is None
    finally:
        os.close(w)


def test_read_key_at_end_of_input():
    r, w = os.pipe()
    os.close(w)
    with open(r, "rb", buffering=0) as reader:
        assert read_key(reader) is None


def test_read_key_without_descriptor():
    assert read_key(io.StringIO("w")) is None


def test_raw_mode_passes_through_non_terminal():
    stream = io.StringIO()
    with raw_mode(stream) as inside:
        assert inside is stream


def test_raw_mode_toggles_and_restores_terminal():
    master, slave = os.openpty()
    try:
        with open(slave, "r", closefd=False) as stream:
            before = termios.tcgetattr(slave)[3]
            with raw_mode(stream):
                flags = termios.tcgetattr(slave)[3]
                assert flags & termios.ICANON == 0
                assert flags & termios.ECHO == 0
            assert termios.tcgetattr(slave)[3] == before
    finally:
        os.close(master)
        os.close(slave)