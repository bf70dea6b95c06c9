"""Cut a document into sections on lines holding only ``--``."""
from __future__ import annotations

import re
from typing import List

SECTION_DELIMITER = re.compile(r"\r?\n--\r?\n")


def slice_document(document: str) -> List[str]:
    """Return the trimmed sections of *document*, in order.

    Section 0 is the metadata header. A document without any delimiter
    comes back as a single section.
    """
    return [cut.strip() for cut in SECTION_DELIMITER.split(document)]
