from textreloaded.cli import main
from textreloaded.processor import process_text


def test_usage_when_arguments_missing(capsys):
    assert main(["only_one"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_processes_each_line(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("Hello ,world!\nHello ,world(up)\n", encoding="utf-8")

    assert main([str(source), str(target)]) == 0

    assert target.read_text(encoding="utf-8") == "Hello, world!\nHello, WORLD\n"
    assert "Processing complete. Check" in capsys.readouterr().out


def test_last_line_without_newline_and_crlf(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    lines = ["Hello ,world!", "I was sitting over    !? . there ,and then      BAMM !  !  !"]
    source.write_bytes((lines[0] + "\r\n" + lines[1]).encode("utf-8"))

    assert main([str(source), str(target)]) == 0

    written = target.read_text(encoding="utf-8").split("\n")
    assert written[:-1] == [process_text(line) for line in lines]
    assert written[-1] == ""


def test_empty_input_gives_empty_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("", encoding="utf-8")

    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == ""


def test_missing_input_reports_error(tmp_path, capsys):
    target = tmp_path / "out.txt"

    assert main([str(tmp_path / "absent.txt"), str(target)]) == 1

    assert "Error opening file" in capsys.readouterr().out
    assert not target.exists()