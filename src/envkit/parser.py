from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ParsedEnv = dict[str, str]

_QUOTE_CHARS = {'"', "'"}


def env_value_uses_quotes(value: str) -> bool:
    """Return True if the value is wrapped in one matching pair of quotes."""
    if len(value) < 2:
        return False
    return value[0] == value[-1] and value[0] in _QUOTE_CHARS


def parse_env_content(content: str | None, *, strict: bool = False) -> ParsedEnv:
    """Parse ``KEY=VALUE`` lines into an ordered mapping.

    Blank lines and ``#`` comments are skipped. The line is split on the first
    ``=`` only, and a value wrapped in matching quotes loses exactly one pair.
    Nothing is unescaped. Later duplicates overwrite earlier ones.

    Lines without ``=``, with an empty key, or containing a NUL character are
    skipped, unless ``strict`` is set, in which case they raise ``ValueError``.
    """
    parsed: ParsedEnv = {}
    if not content:
        return parsed

    for lineno, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            if strict:
                raise ValueError(f"Malformed line {lineno}: expected KEY=VALUE")
            logger.debug("Skipping malformed line %d", lineno)
            continue
        if "\0" in line:
            if strict:
                raise ValueError(f"NUL character on line {lineno}")
            logger.debug("Skipping line %d with a NUL character", lineno)
            continue

        # Quotes are only recognised right after the separator.
        if env_value_uses_quotes(value):
            value = value[1:-1]

        parsed[key] = value.strip()

    return parsed


def load_env_file(env_path: str | Path = ".env", *, strict: bool = False) -> ParsedEnv:
    path = Path(env_path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        logger.debug("Env file %s not found, nothing to load", path)
        return {}
    return parse_env_content(content, strict=strict)
