"""Report scanner for Horizons name/designation searches.

A search matching several bodies answers with a fixed-width table::

      ID#      Name                               Designation  IAU/aliases/other
      -------  ---------------------------------- -----------  -------------------
            4  Mars Barycenter
          499  Mars

Names longer than their column are cut by Horizons; such names get an
overflow marker so the UI can show they are incomplete.
"""

from __future__ import annotations

import logging

from horizons.records import BodySearchRecord

logger = logging.getLogger("orrery.parser")

SEARCH_HEADER = "ID#      Name                               Designation  IAU/aliases/other"
OVERFLOW_MARKER = "..."

# --------------------------------------------------------------------------- #
#  Column layout (characters, left to right)
# --------------------------------------------------------------------------- #
ID_WIDTH = 9
NAME_WIDTH = 32 + 2 + 3
DESIGNATION_WIDTH = 11 + 1
ALIAS_WIDTH = 19 + 2

_NAME_START = ID_WIDTH
_DESIGNATION_START = _NAME_START + NAME_WIDTH
_ALIAS_START = _DESIGNATION_START + DESIGNATION_WIDTH
_ALIAS_END = _ALIAS_START + ALIAS_WIDTH


def mark_overflow(field: str, width: int = NAME_WIDTH) -> str:
    """Append the overflow marker to a full-width field cut mid-word.

    ``field`` is the raw, untrimmed column slice. A slice shorter than the
    column means the row ended inside it, so nothing was cut.
    """
    if len(field) >= width and not field[-1].isspace():
        return field + OVERFLOW_MARKER
    return field


def parse_search_row(line: str) -> BodySearchRecord | None:
    """Slice one table row into a record; None if the ID is not an integer."""
    try:
        body_id = int(line[:ID_WIDTH].strip())
    except ValueError:
        logger.debug("Skipping search row without numeric ID: %r", line)
        return None

    name = mark_overflow(line[_NAME_START:_DESIGNATION_START]).strip()
    designation = line[_DESIGNATION_START:_ALIAS_START].strip()
    other = line[_ALIAS_START:_ALIAS_END].strip()
    return BodySearchRecord(id=body_id, name=name, designation=designation, other=other)


def parse_search_report(text: str) -> list[BodySearchRecord]:
    """Collect every body row of a search response, in table order.

    Lines before the header are ignored; the line right after it is the
    dashed separator. The table ends at the first blank line.
    """
    records: list[BodySearchRecord] = []
    lines = iter(text.splitlines())

    for line in lines:
        if SEARCH_HEADER in line:
            break
    else:
        logger.debug("No search table header in response")
        return records

    next(lines, None)

    for line in lines:
        if not line.strip():
            break
        record = parse_search_row(line)
        if record is not None:
            records.append(record)

    return records
