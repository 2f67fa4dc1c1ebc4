"""Turn plain-text completions into POI records."""

from __future__ import annotations

from poi_generator.schemas import POIRecord

TITLE_SEPARATOR = ' - '


def parse_poi_line(line: str) -> POIRecord:
    """Split one line on the first " - " into title and description.

    Examples:
        >>> parse_poi_line('Louvre - Famous art museum')
        POIRecord(title='Louvre', description='Famous art museum')
        >>> parse_poi_line('Notre Dame')
        POIRecord(title='Notre Dame', description='')
    """
    title, sep, description = line.partition(TITLE_SEPARATOR)
    return POIRecord(title=title.strip(), description=description.strip() if sep else '')


def parse_poi_lines(text: str) -> list[POIRecord]:
    """Parse completion text into records, one per non-blank line, in order."""
    return [parse_poi_line(line) for line in text.split('\n') if line.strip()]
