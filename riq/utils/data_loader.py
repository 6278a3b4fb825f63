"""Data loading and parsing utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from riq.fuzzy import IntuitionisticFuzzyValue

logger = logging.getLogger("riq.utils")


def load_json(filepath: str | Path) -> Any:
    """
    Load JSON data from a file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def parse_ifvs(data: Any) -> List[IntuitionisticFuzzyValue]:
    """
    Parse IFV records from JSON data.

    Accepts either ``{"ifvs": [...]}`` or a bare list of records, each
    record being ``{"name": str, "mu": number, "nu": number}``.
    Degrees are not range-checked.

    Args:
        data: Parsed JSON data

    Returns:
        List of IFVs in file order

    Raises:
        ValueError: If the structure or a record is malformed
    """
    if isinstance(data, dict):
        if "ifvs" not in data:
            raise ValueError("Invalid IFV data: 'ifvs' key missing")
        records = data["ifvs"]
    else:
        records = data

    if not isinstance(records, list):
        raise ValueError("Invalid IFV data: expected a list of records")

    ifvs = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"Invalid IFV record #{index}: expected an object")
        try:
            ifv = IntuitionisticFuzzyValue.from_dict(record)
        except KeyError as e:
            raise ValueError(f"Invalid IFV record #{index}: missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Invalid IFV record #{index} ('{record.get('name')}'): {e}"
            ) from e
        if not isinstance(ifv.name, str):
            raise ValueError(f"Invalid IFV record #{index}: name must be a string")
        ifvs.append(ifv)

    logger.debug(f"Parsed {len(ifvs)} IFVs")
    return ifvs


def load_ifvs(filepath: str | Path) -> List[IntuitionisticFuzzyValue]:
    """Load and parse IFV records from a JSON file."""
    return parse_ifvs(load_json(filepath))


def results_to_json(results: List[Any], warnings: List[str] | None = None) -> str:
    """
    Serialize score results for machine consumption.

    Non-finite scores become ``null``; JSON has no NaN or infinity.
    """
    payload: Dict[str, Any] = {
        "results": [
            {"name": r.name, "riq": r.riq if r.is_finite else None}
            for r in results
        ],
        "warnings": list(warnings or []),
    }
    return json.dumps(payload, indent=2)
