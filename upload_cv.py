#!/usr/bin/env python3
"""Store a CV (PDF, DOCX or TXT) as a user's current document.

    python upload_cv.py <user_id> <path/to/cv.pdf>
    python upload_cv.py <user_id> --delete
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobrec.config import ensure_dirs
from jobrec.documents import DocumentStore
from jobrec.errors import AppError
from jobrec.log import get_logger

log = get_logger(__name__)


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(__doc__)
        return 2

    user_id, target = argv
    ensure_dirs()
    store = DocumentStore()

    if target == "--delete":
        if store.delete_cv(user_id):
            print(f"  ✓ Deleted CV for {user_id}")
            return 0
        print(f"  ✗ No CV stored for {user_id}")
        return 1

    path = Path(target.strip("'\"")).expanduser().resolve()
    if not path.exists():
        print(f"  ✗ File not found: {path}")
        return 1

    try:
        doc = store.save_cv(user_id, path)
    except AppError as exc:
        print(f"  ✗ {exc.message}")
        return 1

    print(f"  ✓ Stored {doc.file_name} for {user_id} ({doc.page_count} page(s), {len(doc.extracted_text)} chars)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
