"""
Basic csv2vtt usage example.

Demonstrates converting a CSV caption sheet to a WebVTT file.
"""

from csv2vtt import CSVParser

def main():
    parser = CSVParser()

    print("Parsing CSV file...")
    result = parser.parse("captions.csv")

    if not result.ok:
        print(f"Found {len(result.errors)} problems:")
        for error in result.errors:
            print(f"  {error.message}")
        return

    with open("captions.vtt", "w", encoding="utf-8") as f:
        f.write(result.document.render() + "\n")

    print(f"Wrote {len(result.document.cues)} cues to captions.vtt")

if __name__ == "__main__":
    main()
