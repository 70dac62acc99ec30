# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Bulk edit of TOML files, keeping comments and layout.

Every ``*.toml`` file under the given directory gets the same updates;
files missing one of the paths are reported and left untouched.

Run with::

    python examples/toml_bulk_edit/toml_bulk_edit.py path/to/configs
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from nestac import Document
from nestac.log import get_logger, setup_root_logger

logger = get_logger(__name__)

UPDATES = {
    'server.port': 8080,
    'server.debug': False,
}


def edit_all(directory: Path) -> int:
    """Apply UPDATES to every TOML file in directory, return files changed."""
    changed = 0
    for filename in sorted(directory.glob('*.toml')):
        doc = Document.load(filename)
        missed = [path for path in UPDATES if path not in doc]
        if missed:
            logger.warning("%s: skipped, missing %s", filename, ', '.join(missed))
            continue
        doc.update_many(UPDATES)
        doc.save()
        changed += 1
        logger.info("%s: updated", filename)
    return changed


if __name__ == '__main__':
    setup_root_logger(logging.INFO)
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path('.')
    print(f"{edit_all(target)} file(s) updated")
