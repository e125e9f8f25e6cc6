from __future__ import annotations

from cafeteria_api.bootstrap import build_app

app = build_app()
