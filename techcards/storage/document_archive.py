"""
Generated Document Archive

Names, saves and lists the generated card documents. Only the newest
documents are kept; older ones are evicted by modification time.
"""

import logging
from datetime import datetime
from typing import Dict, List

from ..common.constants import MAX_GENERATED_FILES
from ..common.text_utils import format_file_size, sanitize_filename
from .blob_store import BlobStore

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".html"


def generate_filename(references: List[str], shown: int = 3, max_length: int = 100) -> str:
    """
    Build a document file name from the batch's references.

    Args:
        references: References in batch order
        shown: How many references appear in the name
        max_length: Cap on the sanitized name part

    Returns:
        File name such as "ref_123_456_789__2_more.html"
    """
    name = "_".join(references[:shown])
    if len(references) > shown:
        name += f"_+{len(references) - shown}_more"
    return f"ref_{sanitize_filename(name, max_length)}{DOCUMENT_SUFFIX}"


class DocumentArchive:
    """Retention-limited storage for generated documents."""

    def __init__(self, store: BlobStore, max_files: int = MAX_GENERATED_FILES):
        self.store = store
        self.max_files = max_files

    def save(self, filename: str, document: str) -> bool:
        """
        Write a document and evict the oldest ones beyond max_files.

        Returns:
            True if the document was written
        """
        try:
            self.store.write_text(filename, document)
        except OSError as e:
            logger.error("Could not write document %s: %s", filename, e)
            return False

        logger.info("Saved document %s (%d bytes)", filename, len(document.encode("utf-8")))
        self.cleanup()
        return True

    def _documents_oldest_first(self) -> List[str]:
        names = [n for n in self.store.list() if n.endswith(DOCUMENT_SUFFIX)]
        return sorted(names, key=lambda n: (self.store.mtime(n) or 0.0, n))

    def cleanup(self) -> int:
        """
        Delete the oldest documents beyond the retention limit.

        Returns:
            Number of documents deleted
        """
        documents = self._documents_oldest_first()
        excess = len(documents) - self.max_files
        deleted = 0

        for name in documents[:max(0, excess)]:
            try:
                self.store.delete(name)
                deleted += 1
            except OSError as e:
                logger.warning("Could not delete old document %s: %s", name, e)

        if deleted:
            logger.debug("Evicted %d old documents", deleted)
        return deleted

    def recent(self, limit: int = 5) -> List[Dict[str, str]]:
        """
        List the newest documents.

        Returns:
            Dicts with filename, size (human readable) and date (dd.mm.YYYY HH:MM)
        """
        recent = []
        for name in reversed(self._documents_oldest_first()):
            mtime = self.store.mtime(name)
            if mtime is None:
                continue
            recent.append({
                "filename": name,
                "size": format_file_size(self.store.size(name)),
                "date": datetime.fromtimestamp(mtime).strftime("%d.%m.%Y %H:%M"),
            })
            if len(recent) >= limit:
                break
        return recent
