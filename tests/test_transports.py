"""Tests for fanlog/transports/ - output destinations"""
import io
import os
import sys

import pytest

from fanlog.errors import WriteError
from fanlog.transports import (
    Transport,
    StreamTransport,
    StandardStreamTransport,
    FileTransport,
    MemoryTransport,
    create_transport,
    list_transports,
    supports_ansi,
)


class FakeTTY(io.StringIO):
    """StringIO that claims to be a terminal"""

    def isatty(self):
        return True


class TestTransportBase:
    """Test Transport abstract base class"""

    def test_transport_is_abstract(self):
        """Cannot instantiate Transport directly"""
        with pytest.raises(TypeError):
            Transport()

    def test_list_transports(self):
        """Core transports are registered"""
        assert list_transports() == ["file", "memory", "stderr", "stdout"]


class TestSupportsAnsi:
    """Tests for terminal detection"""

    def test_plain_buffer(self):
        """A StringIO is not a terminal"""
        assert supports_ansi(io.StringIO()) is False

    def test_tty(self, monkeypatch):
        """A tty with a capable TERM is interactive"""
        monkeypatch.setenv("TERM", "xterm-256color")
        assert supports_ansi(FakeTTY()) is True

    def test_dumb_terminal(self, monkeypatch):
        """TERM=dumb disables escape codes even on a tty"""
        monkeypatch.setenv("TERM", "dumb")
        assert supports_ansi(FakeTTY()) is False

    def test_force_color(self, monkeypatch):
        """FORCE_COLOR marks any stream as a terminal"""
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("TERM", "xterm")
        assert supports_ansi(io.StringIO()) is True


class TestStreamTransport:
    """Tests for StreamTransport"""

    def test_write_passthrough(self):
        """Data is written unchanged"""
        buf = io.StringIO()
        transport = StreamTransport(buf, name="buf")
        transport.write("hello, world")
        assert buf.getvalue() == "hello, world"

    def test_detects_plain(self):
        """Non-tty streams are classified plain"""
        transport = StreamTransport(io.StringIO())
        assert transport.is_interactive is False

    def test_explicit_override(self):
        """interactive= overrides detection"""
        transport = StreamTransport(io.StringIO(), interactive=True)
        assert transport.is_interactive is True

    def test_classification_is_cached(self, monkeypatch):
        """Capability is decided once at construction"""
        monkeypatch.setenv("TERM", "xterm")
        stream = FakeTTY()
        transport = StreamTransport(stream)
        monkeypatch.setattr(stream, "isatty", lambda: False)
        assert transport.is_interactive is True

    def test_closed_stream_raises_write_error(self):
        """Writing to a closed stream raises WriteError"""
        buf = io.StringIO()
        transport = StreamTransport(buf, name="buf")
        buf.close()
        with pytest.raises(WriteError) as exc_info:
            transport.write("x")
        assert exc_info.value.transport == "buf"
        assert isinstance(exc_info.value.cause, ValueError)

    def test_os_error_raises_write_error(self):
        """OSError from the stream is wrapped"""
        class Broken(io.StringIO):
            def write(self, s):
                raise BrokenPipeError("pipe closed")

        transport = StreamTransport(Broken(), name="pipe")
        with pytest.raises(WriteError, match="pipe closed"):
            transport.write("x")

    def test_default_name(self):
        """Name falls back to the stream type"""
        transport = StreamTransport(io.StringIO())
        assert transport.name == "StringIO"


class TestStandardStreamTransport:
    """Tests for stdout/stderr transports"""

    def test_writes_to_current_stdout(self, capsys):
        """sys.stdout is looked up at write time"""
        transport = create_transport("stdout")
        transport.write("to stdout")
        assert capsys.readouterr().out == "to stdout"

    def test_writes_to_stderr(self, capsys):
        """stderr transport targets sys.stderr"""
        transport = create_transport("stderr")
        transport.write("to stderr")
        assert capsys.readouterr().err == "to stderr"

    def test_follows_replaced_stream(self, monkeypatch):
        """A stream swapped in after construction receives writes"""
        transport = StandardStreamTransport("stdout", interactive=False)
        buf = io.StringIO()
        monkeypatch.setattr(sys, "stdout", buf)
        transport.write("swapped")
        assert buf.getvalue() == "swapped"

    def test_invalid_stream_attr(self):
        """Only stdout and stderr are accepted"""
        with pytest.raises(ValueError):
            StandardStreamTransport("stdin")

    def test_close_leaves_stream_open(self, capsys):
        """Closing a standard stream transport does not close sys.stdout"""
        transport = create_transport("stdout")
        transport.close()
        transport.write("still open")
        assert capsys.readouterr().out == "still open"


class TestFileTransport:
    """Tests for FileTransport"""

    def test_always_plain(self, tmp_dir):
        """Files are plain transports"""
        with FileTransport(os.path.join(tmp_dir, "a.log")) as transport:
            assert transport.is_interactive is False

    def test_append_mode(self, tmp_dir):
        """Default mode appends to existing content"""
        path = os.path.join(tmp_dir, "a.log")
        with open(path, "w") as f:
            f.write("old\n")
        with FileTransport(path) as transport:
            transport.write("new\n")
        with open(path) as f:
            assert f.read() == "old\nnew\n"

    def test_truncate_mode(self, tmp_dir):
        """mode='w' starts a fresh file"""
        path = os.path.join(tmp_dir, "a.log")
        with open(path, "w") as f:
            f.write("old\n")
        with FileTransport(path, mode="w") as transport:
            transport.write("new\n")
        with open(path) as f:
            assert f.read() == "new\n"

    def test_creates_parent_dirs(self, tmp_dir):
        """Missing parent directories are created"""
        path = os.path.join(tmp_dir, "nested", "dir", "a.log")
        with FileTransport(path) as transport:
            transport.write("x")
        assert os.path.exists(path)

    def test_invalid_mode(self, tmp_dir):
        """Only append and truncate modes are allowed"""
        with pytest.raises(ValueError):
            FileTransport(os.path.join(tmp_dir, "a.log"), mode="r")

    def test_write_after_close(self, tmp_dir):
        """Writing to a closed file raises WriteError"""
        transport = FileTransport(os.path.join(tmp_dir, "a.log"))
        transport.close()
        assert transport.closed
        with pytest.raises(WriteError):
            transport.write("x")

    def test_close_twice(self, tmp_dir):
        """close() is safe to call twice"""
        transport = FileTransport(os.path.join(tmp_dir, "a.log"))
        transport.close()
        transport.close()

    def test_create_by_kind(self, tmp_dir):
        """Factory builds a file transport from keyword options"""
        path = os.path.join(tmp_dir, "b.log")
        transport = create_transport("file", path=path, mode="w")
        assert isinstance(transport, FileTransport)
        assert transport.name == path
        transport.close()


class TestMemoryTransport:
    """Tests for MemoryTransport"""

    def test_records_writes(self):
        """Each write is kept in order"""
        transport = MemoryTransport()
        transport.write("a")
        transport.write("b")
        assert transport.writes == ["a", "b"]
        assert transport.getvalue() == "ab"

    def test_clear(self):
        """clear() forgets recorded writes"""
        transport = MemoryTransport()
        transport.write("a")
        transport.clear()
        assert transport.writes == []

    def test_repr(self):
        """repr shows the classification"""
        assert "interactive" in repr(MemoryTransport(interactive=True))
        assert "plain" in repr(MemoryTransport())


class TestCreateTransport:
    """Test create_transport factory function"""

    def test_unknown_kind(self):
        """Unknown kinds raise ValueError"""
        with pytest.raises(ValueError, match="Unknown transport 'syslog'"):
            create_transport("syslog")

    def test_kind_normalized(self):
        """Kind names are case-insensitive"""
        assert isinstance(create_transport(" Memory "), MemoryTransport)
