"""Replace the auto-generated region of a stylesheet."""
from __future__ import annotations

import logging
import re
from pathlib import Path

from darkcss.errors import SpliceError

logger = logging.getLogger(__name__)

# From the start of the line holding the begin marker through the end of
# the line holding the last end marker.
REGION_RE = re.compile(r".*begin auto-generated[\s\S]+end auto-generated.*", re.MULTILINE)


def splice_block(text: str, block: str) -> str:
    """Return ``text`` with its marker region replaced by ``block``."""
    new_text, count = REGION_RE.subn(lambda _m: block, text, count=1)
    if not count:
        raise SpliceError("No 'begin auto-generated' ... 'end auto-generated' region found")
    return new_text


def write_block(path: str | Path, block: str) -> bool:
    """Splice ``block`` into the file at ``path``. Returns True if it changed."""
    target = Path(path)
    try:
        text = target.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpliceError(f"Cannot read {target}: {exc}", cause=exc) from exc
    try:
        new_text = splice_block(text, block)
    except SpliceError as exc:
        raise SpliceError(f"{target}: {exc}") from exc
    if new_text == text:
        logger.info("%s is up to date", target)
        return False
    try:
        target.write_text(new_text, encoding="utf-8")
    except OSError as exc:
        raise SpliceError(f"Cannot write {target}: {exc}", cause=exc) from exc
    logger.info("Wrote generated rules to %s", target)
    return True
