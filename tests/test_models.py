from csv2vtt.models import Caption, Comment, Cue, CueSettings, Document


def test_caption_with_speaker():
    assert Caption(speaker="Speaker", text="Huh?").render() == "<v Speaker>Huh?</v>"


def test_caption_without_speaker():
    assert Caption(text="Huh?").render() == "Huh?"
    assert Caption(speaker="  ", text="Huh?").render() == "Huh?"


def test_caption_escapes_and_trims_text():
    caption = Caption(text="  Tom & <Jerry> ")
    assert caption.text == "Tom &amp; &lt;Jerry>"


def test_caption_text_cannot_end_the_cue_block():
    cue = Cue(
        start_time="00:00:00.000",
        end_time="00:00:01.000",
        captions=[Caption(text="first\n\nsecond --> third", speaker="Dog")],
    )
    assert cue.render() == "00:00:00.000 --> 00:00:01.000\n<v Dog>first\nsecond --&gt; third</v>"


def test_comment():
    assert Comment("A comment or note").render() == "NOTE\nA comment or note"
    assert Comment().render() is None


def test_cue_settings_filters_unknown_keys_without_mutating_input():
    raw = {"align": "start", "color": "red", "line": "0"}
    settings = CueSettings(raw)

    assert settings.render() == "align:start line:0"
    assert raw == {"align": "start", "color": "red", "line": "0"}


def test_cue_settings_empty():
    assert CueSettings().render() == ""
    assert not CueSettings({"color": "red"})


def test_cue_time_in_seconds():
    cue = Cue(start_time="01:23:45", end_time="01:23:46.500", captions=[Caption(text="Hi")])
    assert cue.start_time_seconds == 5025.0
    assert cue.end_time_seconds == 5026.5


def test_cue_render_single_caption():
    cue = Cue(
        start_time="00:00:00.000",
        end_time="00:00:02.000",
        captions=[Caption(speaker="Cool Dog", text="Woof!")],
    )
    assert cue.render() == "00:00:00.000 --> 00:00:02.000\n<v Cool Dog>Woof!</v>"


def test_cue_render_with_identifier_and_settings():
    cue = Cue(
        start_time="00:00:00",
        end_time="00:00:02",
        identifier="Monologue",
        captions=[Caption(speaker="Cool Dog", text="Woof!")],
        settings={"align": "start"},
    )
    assert cue.render() == "Monologue\n00:00:00 --> 00:00:02 align:start\n<v Cool Dog>Woof!</v>"


def test_cue_render_multiple_captions():
    cue = Cue(
        start_time="00:00:00",
        end_time="00:00:02",
        captions=[Caption(text="Hello"), Caption(text="Hi!")],
    )
    assert cue.render() == "00:00:00 --> 00:00:02\n- Hello\n- Hi!"


def test_document_render():
    document = Document(cues=[
        Cue(start_time="00:00:00.000", end_time="00:00:01.000", captions=[Caption(text="Woof!", speaker="Dog")]),
        Cue(start_time="00:00:05.000", end_time="00:00:06.000", captions=[Caption(text="Meow!", speaker="Cat")]),
    ])

    assert document.render() == (
        "WEBVTT\n"
        "\n"
        "00:00:00.000 --> 00:00:01.000\n"
        "<v Dog>Woof!</v>\n"
        "\n"
        "00:00:05.000 --> 00:00:06.000\n"
        "<v Cat>Meow!</v>"
    )


def test_document_render_with_style_and_notes():
    document = Document(
        cues=[Cue(start_time="00:00:00.000", end_time="00:00:01.000", captions=[Caption(text="Hi")])],
        style=["STYLE\n::cue { color: yellow; }"],
        notes=[Comment("Translated by volunteers"), Comment("")],
    )

    assert document.render() == (
        "WEBVTT\n\n"
        "STYLE\n::cue { color: yellow; }\n\n"
        "NOTE\nTranslated by volunteers\n\n"
        "00:00:00.000 --> 00:00:01.000\nHi"
    )


def test_empty_document():
    assert Document().render() == "WEBVTT"
