import io

import pytest

import head
from head import head_bytes, head_lines, preprocess_argv
from streams import LineReader

FIVE_LINES = b"one\r\ntwo\nthree\nfour\nfive\n"


def reader_for(data: bytes) -> LineReader:
    return LineReader(io.BytesIO(data))


# --- Truncation ---

def test_head_lines_preserves_terminators():
    out = io.StringIO()
    head_lines(reader_for(FIVE_LINES), 2, out)
    assert out.getvalue() == "one\r\ntwo\n"


def test_head_lines_short_input():
    out = io.StringIO()
    head_lines(reader_for(b"only\nlines"), 10, out)
    assert out.getvalue() == "only\nlines"


def test_head_lines_stops_reading_after_count():
    reader = reader_for(FIVE_LINES)
    head_lines(reader, 1, io.StringIO())
    assert reader.read_line() == (4, "two\n")


def test_head_bytes():
    out = io.StringIO()
    head_bytes(reader_for(FIVE_LINES), 7, out)
    assert out.getvalue() == "one\r\ntw"


def test_head_bytes_more_than_available():
    out = io.StringIO()
    head_bytes(reader_for(b"abc"), 100, out)
    assert out.getvalue() == "abc"


def test_head_bytes_cuts_multibyte_sequence():
    out = io.StringIO()
    head_bytes(reader_for("€uro".encode('utf-8')), 2, out)
    assert out.getvalue() == "�"


# --- Argument handling ---

def test_preprocess_argv():
    assert preprocess_argv(["-3", "file"]) == ["-n", "3", "file"]
    assert preprocess_argv(["-n", "3", "-", "--"]) == ["-n", "3", "-", "--"]


@pytest.fixture
def five(tmp_path):
    path = tmp_path / "five.txt"
    path.write_bytes(FIVE_LINES)
    return str(path)


def test_main_default_ten_lines(run_main, capsys, tmp_path):
    path = tmp_path / "many.txt"
    path.write_text("".join(f"{i}\n" for i in range(1, 21)))
    assert run_main(head, str(path)) == 0
    assert capsys.readouterr().out == "".join(f"{i}\n" for i in range(1, 11))


def test_main_lines(run_main, capsys, five):
    assert run_main(head, "-n", "2", five) == 0
    assert capsys.readouterr().out == "one\r\ntwo\n"


def test_main_historic_count(run_main, capsys, five):
    assert run_main(head, "-3", five) == 0
    assert capsys.readouterr().out == "one\r\ntwo\nthree\n"


def test_main_bytes(run_main, capsys, five):
    assert run_main(head, "--bytes", "3", five) == 0
    assert capsys.readouterr().out == "one"


@pytest.mark.parametrize("argv", [
    ["-n", "0"],
    ["-c", "0"],
    ["-n", "x"],
    ["-n", "2", "-c", "3"],
])
def test_main_rejects_bad_arguments(run_main, five, argv):
    assert run_main(head, *argv, five) == 1


def test_main_stdin(run_main, capsys, feed_stdin):
    feed_stdin(b"a\nb\nc\n")
    assert run_main(head, "-n", "2") == 0
    assert capsys.readouterr().out == "a\nb\n"


def test_main_headers_for_multiple_files(run_main, capsys, tmp_path):
    file1 = tmp_path / "file1"
    file2 = tmp_path / "file2"
    file1.write_text("first\n")
    file2.write_text("second\n")

    assert run_main(head, str(file1), str(file2)) == 0
    assert capsys.readouterr().out == (
        f"==> {file1} <==\n"
        "first\n"
        "\n"
        f"==> {file2} <==\n"
        "second\n"
    )


def test_main_missing_file_is_skipped(run_main, capsys, five, tmp_path):
    missing = str(tmp_path / "missing")
    assert run_main(head, "-n", "1", missing, five) == 0

    captured = capsys.readouterr()
    assert captured.err == f"{missing}: No such file or directory\n"
    assert captured.out == f"\n==> {five} <==\none\r\n"


def test_run_separator_follows_token_position(capsys, tmp_path):
    present = tmp_path / "present"
    present.write_text("x\n")
    missing = str(tmp_path / "missing")

    assert head.run([missing, str(present)]) == 0
    assert capsys.readouterr().out == f"\n==> {present} <==\nx\n"

    assert head.run([str(present), missing]) == 0
    assert capsys.readouterr().out == f"==> {present} <==\nx\n"


def test_run_closes_file_after_early_stop(monkeypatch, five, capsys):
    opened = []
    real_resolve = head.resolve

    def resolve(token):
        reader = real_resolve(token)
        opened.append(reader)
        return reader

    monkeypatch.setattr(head, "resolve", resolve)
    assert head.run([five, five], lines=1) == 0
    assert len(opened) == 2
    assert all(reader.stream.closed for reader in opened)


def test_run_read_error_continues(monkeypatch, capsys, five, failing_stream):
    real_resolve = head.resolve

    def resolve(token):
        if token == "broken":
            return LineReader(failing_stream(), token, owns_stream=True)
        return real_resolve(token)

    monkeypatch.setattr(head, "resolve", resolve)
    assert head.run(["broken", five], byte_count=3) == 1

    captured = capsys.readouterr()
    assert "broken: Input/output error" in captured.err
    assert captured.out == f"==> broken <==\n\n==> {five} <==\none"
