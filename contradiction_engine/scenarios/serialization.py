"""
JSON import/export of the scenario list.

The exchanged shape is a JSON array of scenario objects with camelCase keys:

    [
      {
        "id": "haiti",
        "name": "Haiti (Q3 2025)",
        "note": "...",
        "period": {
          "baselineD": 2.5,
          "violations": {"security": {"scope": 0.9, "severity": 0.9, "salience": 0.9}, ...},
          "repair": {"ack": 0.7, "reform": 0.4, "comp": 0.5, "inclusive": 0.5, "fidelity": 0.3},
          "health": {"L": 0.4, "E": 0.45, "K": 0.3, "C": 0.4, "B": 0.55, "T": 0.3, "P": 0.6}
        },
        "eventDate": "2026-01-15",
        "cdFlagDate": "2025-07-15",
        "altModelName": "FSI/PITF (illustrative)",
        "altFlagDate": "2025-11-01"
      }
    ]

Optional fields that are unset are omitted on export.
"""

import json
import logging
import time
from typing import Dict, List, Optional, Union

from ..config.model_config import PLAYGROUND_CONFIG
from ..scoring.inputs import (
    parse_number,
    Triple,
    ViolationDomains,
    RepairDims,
    Health,
    PeriodInput,
)
from .scenario_store import (
    Scenario,
    default_triple,
    default_repair,
    default_health,
)

logger = logging.getLogger(__name__)

# Python field name -> JSON key
DOMAIN_KEYS = {
    "security": "security",
    "rule_of_law": "ruleOfLaw",
    "center_local": "centerLocal",
    "narrative_gap": "narrativeGap",
    "humanitarian": "humanitarian",
}

TRIPLE_KEYS = {"scope": "scope", "severity": "severity", "salience": "salience"}

REPAIR_KEYS = {
    "ack": "ack",
    "reform": "reform",
    "comp": "comp",
    "inclusive": "inclusive",
    "fidelity": "fidelity",
}

HEALTH_KEYS = {
    "legitimacy": "L",
    "elite_cohesion": "E",
    "capacity": "K",
    "cost_strain": "C",
    "backfire": "B",
    "trust": "T",
    "protest": "P",
}

OPTIONAL_KEYS = {
    "note": "note",
    "event_date": "eventDate",
    "cd_flag_date": "cdFlagDate",
    "alt_model_name": "altModelName",
    "alt_flag_date": "altFlagDate",
}


class ScenarioImportError(Exception):
    """Raised when an imported payload cannot be turned into scenarios."""

    def __init__(self, message: str, error_type: str = "INVALID_JSON_STRUCTURE"):
        super().__init__(message)
        self.error_type = error_type


# --- Export ---

def _fields_to_dict(record, keys: Dict[str, str]) -> Dict:
    return {json_key: getattr(record, attr) for attr, json_key in keys.items()}


def period_to_dict(period: PeriodInput) -> Dict:
    return {
        "baselineD": period.baseline_debt,
        "violations": {
            json_key: _fields_to_dict(getattr(period.violations, attr), TRIPLE_KEYS)
            for attr, json_key in DOMAIN_KEYS.items()
        },
        "repair": _fields_to_dict(period.repair, REPAIR_KEYS),
        "health": _fields_to_dict(period.health, HEALTH_KEYS),
    }


def scenario_to_dict(scenario: Scenario) -> Dict:
    data = {"id": scenario.id, "name": scenario.name}
    if scenario.note is not None:
        data["note"] = scenario.note
    data["period"] = period_to_dict(scenario.period)
    for attr, json_key in OPTIONAL_KEYS.items():
        if attr == "note":
            continue
        value = getattr(scenario, attr)
        if value is not None:
            data[json_key] = value
    return data


def scenarios_to_json(scenarios: List[Scenario]) -> str:
    """Serialize the collection verbatim as a pretty-printed JSON array."""
    payload = [scenario_to_dict(s) for s in scenarios]
    logger.info(f"Exporting {len(payload)} scenarios")
    return json.dumps(payload, indent=PLAYGROUND_CONFIG["export_indent"], ensure_ascii=False)


# --- Import ---

def _require_object(value, where: str) -> Dict:
    if not isinstance(value, dict):
        raise ScenarioImportError(
            f"{where}: expected an object, got {type(value).__name__}",
            error_type="INVALID_JSON_STRUCTURE",
        )
    return value


def _read_number(data: Dict, key: str, default: float, where: str) -> float:
    if key not in data:
        return default
    try:
        return parse_number(data[key])
    except ValueError as e:
        raise ScenarioImportError(f"{where}.{key}: {e}", error_type="DATA_VALIDATION_ERROR")


def _read_record(cls, data, keys: Dict[str, str], defaults, where: str):
    data = _require_object(data, where)
    values = {
        attr: _read_number(data, json_key, getattr(defaults, attr), where)
        for attr, json_key in keys.items()
    }
    return cls(**values)


def period_from_dict(data, where: str = "period") -> PeriodInput:
    data = _require_object(data, where)

    if "baselineD" not in data:
        logger.warning(
            f"{where}: no baselineD, using {PLAYGROUND_CONFIG['missing_baseline_debt']}"
        )
    baseline_debt = _read_number(
        data, "baselineD", PLAYGROUND_CONFIG["missing_baseline_debt"], where
    )

    violations_data = _require_object(data.get("violations", {}), f"{where}.violations")
    violations = ViolationDomains(**{
        attr: _read_record(
            Triple,
            violations_data.get(json_key, {}),
            TRIPLE_KEYS,
            default_triple(),
            f"{where}.violations.{json_key}",
        )
        for attr, json_key in DOMAIN_KEYS.items()
    })

    return PeriodInput(
        baseline_debt=baseline_debt,
        violations=violations,
        repair=_read_record(RepairDims, data.get("repair", {}), REPAIR_KEYS,
                            default_repair(), f"{where}.repair"),
        health=_read_record(Health, data.get("health", {}), HEALTH_KEYS,
                            default_health(), f"{where}.health"),
    )


def _read_string(data: Dict, key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ScenarioImportError(
            f"{where}.{key}: expected a string, got {type(value).__name__}",
            error_type="DATA_VALIDATION_ERROR",
        )
    return value


def scenario_from_dict(data, index: int = 0) -> Scenario:
    where = f"scenario[{index}]"
    data = _require_object(data, where)

    scenario_id = data.get("id")
    if scenario_id is None:
        scenario_id = f"{PLAYGROUND_CONFIG['new_case']['id_prefix']}{int(time.time() * 1000)}_{index}"

    optional = {
        attr: _read_string(data, json_key, where)
        for attr, json_key in OPTIONAL_KEYS.items()
    }

    # null counts as missing
    name = _read_string(data, "name", where)
    if name is None:
        name = PLAYGROUND_CONFIG["new_case"]["name"]

    return Scenario(
        id=str(scenario_id),
        name=name,
        period=period_from_dict(data.get("period", {}), f"{where}.period"),
        **optional,
    )


def scenarios_from_json(content: Union[str, bytes]) -> List[Scenario]:
    """
    Parse an exported scenario list.

    Args:
        content: JSON text (or UTF-8 bytes) of a scenario array

    Returns:
        List of scenarios in file order

    Raises:
        ScenarioImportError: If the JSON is malformed, is not an array,
            or holds an element that cannot be read
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ScenarioImportError(f"Invalid JSON: {e}", error_type="JSON_PARSE_ERROR")

    try:
        payload = json.loads(content)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integer literals and runaway nesting
        logger.error(f"Scenario import rejected, invalid JSON: {e}")
        raise ScenarioImportError(f"Invalid JSON: {e}", error_type="JSON_PARSE_ERROR")

    if not isinstance(payload, list):
        logger.error(f"Scenario import rejected, top level is {type(payload).__name__}")
        raise ScenarioImportError(
            f"Expected a JSON array of scenarios, got {type(payload).__name__}",
            error_type="INVALID_JSON_STRUCTURE",
        )

    scenarios = []
    seen_ids = set()
    for index, item in enumerate(payload):
        scenario = scenario_from_dict(item, index)
        if scenario.id in seen_ids:
            raise ScenarioImportError(
                f"scenario[{index}]: duplicate id {scenario.id!r}",
                error_type="DATA_VALIDATION_ERROR",
            )
        seen_ids.add(scenario.id)
        scenarios.append(scenario)

    logger.info(f"Imported {len(scenarios)} scenarios")
    return scenarios
