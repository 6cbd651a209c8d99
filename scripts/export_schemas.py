"""Export JSON schemas for TripPlan and the booking request body."""

import json
import sys
from pathlib import Path

from backend.app.models import BookingRequest, TripPlan


def main(schemas_dir: Path = Path("docs/schemas")) -> list[Path]:
    """Export schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    # TripPlan is the internal plan; field names as in Python
    plan_path = schemas_dir / "TripPlan.schema.json"
    with open(plan_path, "w") as f:
        json.dump(TripPlan.model_json_schema(), f, indent=2)
    print(f"Exported TripPlan schema to {plan_path}")
    written.append(plan_path)

    # BookingRequest goes over the wire in camelCase
    booking_path = schemas_dir / "BookingRequest.schema.json"
    with open(booking_path, "w") as f:
        json.dump(BookingRequest.model_json_schema(by_alias=True), f, indent=2)
    print(f"Exported BookingRequest schema to {booking_path}")
    written.append(booking_path)

    return written


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else Path("docs/schemas"))
