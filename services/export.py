import csv
import io
from typing import Any, Dict, List


def _cell(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ', '.join(str(v) for v in value)
    return '' if value is None else value


def to_csv(records: List[Dict[str, Any]]) -> str:
    """Exports records to a CSV string."""
    if not records:
        return ""

    output = io.StringIO()
    # Ensure all dicts have the same keys for the header
    fieldnames = sorted({key for item in records for key in item.keys()})
    writer = csv.DictWriter(output, fieldnames=fieldnames)
    writer.writeheader()
    for item in records:
        writer.writerow({k: _cell(item.get(k)) for k in fieldnames})
    return output.getvalue()
