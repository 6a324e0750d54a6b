"""
Streaming cues example.

Demonstrates handling each cue as soon as it is complete, with custom
column names and an embedded style sheet.
"""

from csv2vtt import CSVParser, read_style

def main():
    parser = CSVParser(key_map={
        "timestamp": "Time",
        "speaker": "Character",
        "content": "Dialogue",
        "settings": "Position",
    })

    def on_cue(cue):
        print(f"[{cue.start_time} - {cue.end_time}] {len(cue.captions)} caption(s)")

    style = read_style("theme.css")
    result = parser.parse("script.csv", on_cue=on_cue, style=[style] if style else [])

    if result.ok:
        print(result.document.render())

if __name__ == "__main__":
    main()
