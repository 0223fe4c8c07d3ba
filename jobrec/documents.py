"""Per-user CV document store: extracted text kept as JSON with file locking.

Supports PDF (via pdftotext or pypdf), DOCX (via stdlib zipfile), and TXT.
"""
from __future__ import annotations

import fcntl
import json
import re
import shutil
import subprocess
import zipfile
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from xml.etree import ElementTree

from pypdf import PdfReader

from jobrec.config import CV_DIR
from jobrec.errors import BadRequestError
from jobrec.log import get_logger

log = get_logger(__name__)

_SAFE_ID_RE = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass
class CvDocument:
    user_id: str
    file_name: str
    page_count: int
    extracted_text: str
    uploaded_at: str


# ── Text extraction ──────────────────────────────────────────────────────


def extract_text(path: Path) -> tuple[str, int]:
    """Return ``(text, page_count)`` from a PDF, DOCX, or TXT file."""
    suffix = path.suffix.lower()
    if suffix == ".txt":
        return path.read_text(encoding="utf-8", errors="ignore"), 1
    if suffix == ".docx":
        return _extract_docx(path), 1
    if suffix == ".pdf":
        return _extract_pdf(path)
    raise BadRequestError(f"Unsupported CV format: {suffix}")


def _fix_spacing(text: str) -> str:
    """Re-insert spaces when PDF extraction merges words together."""
    if not text or len(text) < 50:
        return text
    space_ratio = text.count(" ") / len(text)
    if space_ratio > 0.08:
        return text

    log.debug("Low space ratio (%.2f%%), applying spacing fix", space_ratio * 100)
    fixed = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    fixed = re.sub(r"([a-zA-Z])(\d)", r"\1 \2", fixed)
    fixed = re.sub(r"(\d)([a-zA-Z])", r"\1 \2", fixed)
    fixed = re.sub(r"([.!?,;:])([A-Za-z])", r"\1 \2", fixed)
    return fixed


def _extract_pdf(path: Path) -> tuple[str, int]:
    reader = PdfReader(str(path))
    page_count = len(reader.pages)

    # Prefer pdftotext (better spacing) over pypdf
    if shutil.which("pdftotext"):
        result = subprocess.run(
            ["pdftotext", "-layout", str(path), "-"],
            capture_output=True,
            text=True,
            timeout=30,
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout, page_count

    pages = [_fix_spacing(page.extract_text() or "") for page in reader.pages]
    return "\n".join(pages), page_count


def _extract_docx(path: Path) -> str:
    ns = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
    texts: list[str] = []
    with zipfile.ZipFile(path) as zf:
        with zf.open("word/document.xml") as f:
            tree = ElementTree.parse(f)
            for para in tree.iter(f"{ns}p"):
                parts = [node.text for node in para.iter(f"{ns}t") if node.text]
                if parts:
                    texts.append("".join(parts))
    return "\n".join(texts)


# ── Store ────────────────────────────────────────────────────────────────


def _lock(f, exclusive: bool = True) -> None:
    """Advisory file lock (Unix fcntl)."""
    try:
        op = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
        fcntl.flock(f.fileno(), op)
    except (OSError, AttributeError):
        pass


def _unlock(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


class DocumentStore:
    """One JSON file per user holding the latest uploaded CV."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root or CV_DIR

    def _path(self, user_id: str) -> Path:
        if not user_id or not user_id.strip():
            raise BadRequestError("User id is required")
        return self.root / f"{_SAFE_ID_RE.sub('_', user_id.strip())}.json"

    def get_cv_user(self, user_id: str) -> CvDocument | None:
        path = self._path(user_id)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            _lock(f, exclusive=False)
            data = json.load(f)
            _unlock(f)
        return CvDocument(**data)

    def put(self, doc: CvDocument) -> CvDocument:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self._path(doc.user_id)
        with open(path, "w", encoding="utf-8") as f:
            _lock(f)
            json.dump(asdict(doc), f, ensure_ascii=False, indent=2)
            _unlock(f)
        log.debug("Stored CV for %s → %s", doc.user_id, path.name)
        return doc

    def save_cv(self, user_id: str, path: Path) -> CvDocument:
        """Extract *path* and store it as the user's CV, replacing any previous one."""
        if not path.exists() or not path.stat().st_size:
            raise BadRequestError("No file uploaded")
        log.info("Extracting text from %s", path.name)
        text, page_count = extract_text(path)
        if not text.strip():
            raise BadRequestError(f"Could not extract any text from {path.name}")

        if self.get_cv_user(user_id) is not None:
            log.info("Replacing existing CV for %s", user_id)
        doc = CvDocument(
            user_id=user_id,
            file_name=path.name,
            page_count=page_count,
            extracted_text=text,
            uploaded_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M"),
        )
        return self.put(doc)

    def delete_cv(self, user_id: str) -> bool:
        path = self._path(user_id)
        if not path.exists():
            return False
        path.unlink()
        log.info("Deleted CV for %s", user_id)
        return True
