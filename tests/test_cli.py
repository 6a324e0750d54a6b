from unittest import mock

import requests

from csv2vtt.cli import main, resolve_output_path

CSV = "Time Stamp,Speaker,Text,Style\n00:00-00:02,Cool Dog,Woof!,\n,Cool Cat,Meow!,\n"


def write_csv(tmp_path, content=CSV, name="captions.csv"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_resolve_output_path(tmp_path):
    assert resolve_output_path("in/captions.csv", str(tmp_path)) == str(tmp_path / "captions.vtt")
    assert resolve_output_path("in/captions.csv", str(tmp_path / "out.vtt")) == str(tmp_path / "out.vtt")
    assert resolve_output_path("https://example.com/sheet.csv", str(tmp_path)) == str(tmp_path / "sheet.vtt")


def test_converts_to_output_file(tmp_path, capsys):
    source = write_csv(tmp_path)
    output = tmp_path / "out.vtt"

    assert main([str(source), "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == (
        "WEBVTT\n\n00:00:00.000 --> 00:00:02.000\n- <v Cool Dog>Woof!</v>\n- <v Cool Cat>Meow!</v>\n"
    )
    assert f"Wrote VTT content to {output}" in capsys.readouterr().out


def test_defaults_to_current_directory(tmp_path, monkeypatch):
    source = write_csv(tmp_path)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert main([str(source)]) == 0
    assert (workdir / "captions.vtt").exists()


def test_style_option(tmp_path):
    source = write_csv(tmp_path)
    css = tmp_path / "theme.css"
    css.write_text("::cue { color: yellow; }\n", encoding="utf-8")
    output = tmp_path / "out.vtt"

    assert main([str(source), "-o", str(output), "--style", str(css)]) == 0
    assert output.read_text(encoding="utf-8").startswith("WEBVTT\n\nSTYLE\n::cue { color: yellow; }\n\n")


def test_column_options(tmp_path):
    source = write_csv(tmp_path, "Time,Who,Line,Style\n01-02,Narrator,Hello,\n")
    output = tmp_path / "out.vtt"

    code = main([
        str(source), "-o", str(output),
        "--timestamp-column", "Time", "--speaker-column", "Who", "--text-column", "Line",
    ])

    assert code == 0
    assert "<v Narrator>Hello</v>" in output.read_text(encoding="utf-8")


def test_reports_every_error(tmp_path, capsys):
    source = write_csv(tmp_path, "Time Stamp,Speaker,Text,Style\n00:10-00:05,,Bad,\n00:00:01,,Worse,\n")
    output = tmp_path / "out.vtt"

    assert main([str(source), "-o", str(output)]) == 1
    assert not output.exists()

    err = capsys.readouterr().err
    assert "Encountered 2 errors:" in err
    assert "Invalid timestamp range on Line 2" in err
    assert "Line 3: Missing start or end timestamp value" in err


def test_reports_missing_header(tmp_path, capsys):
    source = write_csv(tmp_path, "Times,Content\n00:00-00:01,Hi\n")

    assert main([str(source), "-o", str(tmp_path / "out.vtt")]) == 1
    err = capsys.readouterr().err
    assert "Encountered 1 error:" in err
    assert "CSV is missing the following header keys" in err


def test_reports_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv"), "-o", str(tmp_path)]) == 1
    assert "Encountered 1 error:" in capsys.readouterr().err


def test_reports_download_failure(tmp_path, capsys):
    with mock.patch("csv2vtt.loader.requests.get", side_effect=requests.ConnectionError("refused")):
        code = main(["https://example.com/captions.csv", "-o", str(tmp_path)])

    assert code == 1
    assert "refused" in capsys.readouterr().err


def test_reports_unreadable_csv(tmp_path, capsys):
    source = write_csv(tmp_path, "Time Stamp,Speaker,Text,Style\n00:00-00:02,,\"" + "x" * 200000 + "\",\n")
    output = tmp_path / "out.vtt"

    assert main([str(source), "-o", str(output)]) == 1
    assert not output.exists()
    assert "Line 2: Unable to read CSV" in capsys.readouterr().err
