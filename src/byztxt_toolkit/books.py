"""
byztxt file names → OSIS book ids.
"""
from pathlib import Path


BOOK_MAP = {
    'MT': 'Matt', 'MR': 'Mark', 'LU': 'Luke', 'JOH': 'John',
    'AC': 'Acts', 'RO': 'Rom', '1CO': '1Cor', '2CO': '2Cor',
    'GA': 'Gal', 'EPH': 'Eph', 'PHP': 'Phil', 'COL': 'Col',
    '1TH': '1Thess', '2TH': '2Thess', '1TI': '1Tim', '2TI': '2Tim',
    'TIT': 'Titus', 'PHM': 'Phlm', 'HEB': 'Heb',
    'JAS': 'Jas', '1PE': '1Pet', '2PE': '2Pet',
    '1JO': '1John', '2JO': '2John', '3JO': '3John',
    'JUDE': 'Jude', 'RE': 'Rev',
}


def book_for_file(path) -> str | None:
    """OSIS id for a .UTR file, or None if the file is not a known book."""
    return BOOK_MAP.get(Path(path).stem.upper())
