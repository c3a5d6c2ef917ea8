"""Allow ``python -m create_q_base_web``."""

from __future__ import annotations

from create_q_base_web.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
