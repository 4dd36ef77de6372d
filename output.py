"""
Output files for ElNotices: one plain-text file per channel
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from models import Channel, RenderedNotice

logger = logging.getLogger(__name__)


class NoticeSink:
    """Append-only text destinations, one per channel"""

    def __init__(self, email_path: Union[str, Path], print_path: Union[str, Path]):
        self.paths: Dict[Channel, Path] = {
            Channel.EMAIL: Path(email_path),
            Channel.PRINT: Path(print_path),
        }

    def reset(self) -> None:
        """Remove earlier output so a run never appends to stale notices"""
        for path in self.paths.values():
            if path.exists():
                path.unlink()
                logger.debug("Removed old output %s", path)

    def append(self, channel: Channel, text: str) -> None:
        with open(self.paths[channel], "a", encoding="utf-8") as f:
            f.write(text)

    def write_all(self, notices: Iterable[RenderedNotice]) -> Dict[Channel, int]:
        """
        Append every notice to its channel file; returns counts per channel.
        Each file gets its whole batch in a single write.
        """
        batches: Dict[Channel, List[str]] = {c: [] for c in self.paths}
        for n in notices:
            batches[n.channel].append(n.text)

        counts = {}
        for channel, texts in batches.items():
            if texts:
                self.append(channel, "".join(texts))
            counts[channel] = len(texts)
            logger.info("Wrote %d %s notices to %s", len(texts), channel.value, self.paths[channel])
        return counts
