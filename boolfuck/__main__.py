from __future__ import annotations

from boolfuck.cli import main

raise SystemExit(main())
