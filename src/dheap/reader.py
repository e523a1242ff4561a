from pathlib import Path
from typing import Union

from src.dheap.logger import logger
from src.dheap.settings import MAX_CAPACITY, MAX_KEY, MIN_KEY


def parse_keys(
    text: str,
    capacity: int = MAX_CAPACITY,
    min_key: int = MIN_KEY,
    max_key: int = MAX_KEY
) -> list[int]:
    """
    Parse comma separated integer keys.

    Parsing stops at the first token that is not an integer or falls
    outside [min_key, max_key]; the keys read up to that point are kept.
    Reading also stops once `capacity` keys have been collected. Blank
    tokens, such as the one left by a trailing comma, are skipped.

    Parameters
    ----------
    text : str
        Raw input, e.g. "3, 1, 6,\\n5,2".
    capacity : int
        Maximum number of keys to return.
    min_key, max_key : int
        Inclusive range accepted for a key.

    Returns
    -------
    list[int]
        The accepted prefix of keys.
    """
    keys = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            key = int(token)
        except ValueError:
            logger.warning("Stopped reading at malformed token %r", token)
            break
        if key < min_key or key > max_key:
            logger.warning(
                "Stopped reading at out of range key %d", key
            )
            break
        keys.append(key)
        if len(keys) == capacity:
            logger.info("Stopped reading at capacity %d", capacity)
            break
    return keys


def read_keys(
    path: Union[str, Path],
    capacity: int = MAX_CAPACITY,
    min_key: int = MIN_KEY,
    max_key: int = MAX_KEY
) -> list[int]:
    """Read keys from a comma separated text file; see `parse_keys`."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        logger.error("Could not open file %s: %s", path, exc)
        return []
    keys = parse_keys(text, capacity, min_key, max_key)
    logger.info("Read %d keys from %s", len(keys), path)
    return keys
