"""
Data models for csv2vtt.

Defines the value objects that make up a WebVTT document and know how to
render themselves as WebVTT text.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Union

from .utils import CUE_SETTING_KEYS, escape_cue_text, timestamp_to_seconds


@dataclass
class Caption:
    """
    A single line of text within a cue.

    Text is escaped and trimmed on construction. When a speaker is set the
    text is wrapped in a voice tag.
    """
    text: str
    speaker: Optional[str] = None

    def __post_init__(self):
        self.text = escape_cue_text(self.text)
        if self.speaker is not None:
            self.speaker = self.speaker.strip() or None

    @property
    def has_speaker(self) -> bool:
        return bool(self.speaker)

    def render(self) -> str:
        if not self.has_speaker:
            return self.text
        return f"<v {self.speaker}>{self.text}</v>"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Comment:
    """A NOTE block."""
    text: Optional[str] = None

    def render(self) -> Optional[str]:
        if not self.text:
            return None
        return f"NOTE\n{self.text}"


class CueSettings:
    """
    Positioning settings for a cue.

    Only the recognized WebVTT keys are kept, in the order they were given.
    The mapping passed in is copied, never modified.
    """

    def __init__(self, settings: Optional[Mapping[str, str]] = None):
        self._settings: Dict[str, str] = {
            str(key): str(value)
            for key, value in (settings or {}).items()
            if str(key) in CUE_SETTING_KEYS
        }

    def __bool__(self) -> bool:
        return bool(self._settings)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CueSettings):
            return NotImplemented
        return list(self._settings.items()) == list(other._settings.items())

    def __repr__(self) -> str:
        return f"CueSettings({self._settings!r})"

    def as_dict(self) -> Dict[str, str]:
        return dict(self._settings)

    def render(self) -> str:
        return ' '.join(f"{key}:{value}" for key, value in self._settings.items())

    def __str__(self) -> str:
        return self.render()


@dataclass(eq=False)
class Cue:
    """
    Represents a VTT cue: a time range holding one or more captions.

    Cues compare by identity, so a continuation row that extends a cue is
    recognised as the same cue.

    Example:
        >>> cue = Cue(start_time="00:00:01.000", end_time="00:00:02.000",
        ...           captions=[Caption(text="Hello!", speaker="Narrator")])
        >>> cue.render()
        '00:00:01.000 --> 00:00:02.000\\n<v Narrator>Hello!</v>'
    """
    start_time: str  # HH:MM:SS.mmm
    end_time: str    # HH:MM:SS.mmm
    captions: List[Caption] = field(default_factory=list)
    identifier: Optional[str] = None
    settings: Union[CueSettings, Mapping[str, str], None] = None

    def __post_init__(self):
        if not isinstance(self.settings, CueSettings):
            self.settings = CueSettings(self.settings)

    @property
    def start_time_seconds(self) -> float:
        return timestamp_to_seconds(self.start_time)

    @property
    def end_time_seconds(self) -> float:
        return timestamp_to_seconds(self.end_time)

    def add_caption(self, caption: Caption) -> None:
        self.captions.append(caption)

    def timing_line(self) -> str:
        timing = f"{self.start_time} --> {self.end_time}"
        if self.settings:
            timing = f"{timing} {self.settings.render()}"
        return timing

    def render(self) -> str:
        if len(self.captions) == 1:
            body = self.captions[0].render()
        else:
            # Several speakers share the cue, one dashed line each
            body = '\n'.join(f"- {caption.render()}" for caption in self.captions)

        lines = [self.identifier, self.timing_line(), body]
        return '\n'.join(line for line in lines if line is not None)

    def __str__(self) -> str:
        return self.render()


@dataclass
class Document:
    """
    A complete WebVTT document.

    Renders the WEBVTT header, then style blocks, notes and cues, with a
    blank line between each block.
    """
    cues: List[Cue] = field(default_factory=list)
    style: List[str] = field(default_factory=list)
    notes: List[Comment] = field(default_factory=list)

    def render(self) -> str:
        blocks = ['WEBVTT']
        blocks.extend(self.style)
        blocks.extend(note.render() for note in self.notes if note.render())
        blocks.extend(cue.render() for cue in self.cues)
        return '\n\n'.join(blocks)

    def __str__(self) -> str:
        return self.render()


@dataclass
class ConvertConfig:
    """Configuration for a CSV to VTT conversion."""
    input: str
    output: str
    style_path: Optional[str] = None
    key_map: Optional[Dict[str, str]] = None
    encoding: str = "utf-8"
    timeout: int = 30
