from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from backend.trip_planner.main import app

REQUIRED_OPERATIONS = {
    "/api/health": {"get"},
    "/api/plans": {"get", "post"},
    "/api/plans/{plan_id}": {"put", "delete"},
    "/api/plans/{plan_id}/period": {"put"},
    "/api/plans/{plan_id}/location": {"put"},
    "/api/plans/{plan_id}/transport": {"put"},
    "/api/plans/{plan_id}/cost": {"get"},
    "/api/plans/{plan_id}/detail": {"get"},
    "/api/plans/{plan_id}/places": {"post"},
    "/api/plans/{plan_id}/places/{place_id}": {"put", "delete"},
}


def main() -> int:
    paths = app.openapi().get("paths", {})

    errors = []
    for path, methods in REQUIRED_OPERATIONS.items():
        missing = methods - set(paths.get(path, {}))
        if missing:
            errors.append(f"[오류] OpenAPI 스펙에 {path} {sorted(missing)} 가 없습니다.")

    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    print("OpenAPI 필수 경로 검증 완료")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
