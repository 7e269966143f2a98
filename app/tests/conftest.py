from __future__ import annotations

import os
import tempfile

# Keep log files out of the user's cache folder while tests import the package.
os.environ.setdefault("LINGOAUDIT_CACHE", tempfile.mkdtemp(prefix="lingoaudit-tests-"))
