#!/usr/bin/env python3
"""Print job recommendations for a user as JSON.

    python run_recommend.py <user_id>
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobrec.errors import error_handler
from jobrec.log import get_logger

log = get_logger(__name__)


def main(argv: list[str]) -> int:
    if len(argv) != 1 or argv[0] in ("-h", "--help"):
        print(__doc__)
        return 2

    from jobrec.recommendation import get_job_recommendations

    try:
        result = get_job_recommendations(argv[0])
    except Exception as exc:
        message, status = error_handler(exc)
        if status >= 500:
            log.exception("Job recommendation failed")
        print(json.dumps({"success": False, "message": message, "status": status}, indent=2))
        return 1

    print(json.dumps({"success": True, **result.to_dict()}, indent=2, ensure_ascii=False))
    log.info("Returned %d jobs for %s", result.total_jobs, argv[0])
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
