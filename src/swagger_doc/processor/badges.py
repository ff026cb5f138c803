"""Badge configuration parsing.

Turns a flat ``tag:color,tag:color`` string into a tag to colour mapping.
"""

import logging

logger = logging.getLogger(__name__)

ENTRY_DELIMITER = ","
PAIR_DELIMITER = ":"


def parse_badges(
    config: str,
    entry_delimiter: str = ENTRY_DELIMITER,
    pair_delimiter: str = PAIR_DELIMITER,
) -> dict[str, str]:
    """Parse a badge configuration string into {tag: color}.

    Entries that do not split into exactly two fields are skipped. Later
    duplicates overwrite earlier ones.
    """
    badges: dict[str, str] = {}
    if not config:
        return badges

    for entry in config.split(entry_delimiter):
        parts = entry.split(pair_delimiter)
        if len(parts) != 2:
            logger.debug("Ignoring malformed badge entry %r", entry)
            continue
        tag, color = parts[0].strip(), parts[1].strip()
        badges[tag] = color
    return badges
