# ──────────────────────────────────────────────────────────────────────────────
# File: configuration/audit.py
# Purpose: Report which configured keys are present, missing, or malformed
#
# Validates:
#   • Presence of each key in its accessor's source
#   • Decodability of the value (boolean accessors reject non-JSON-booleans)
#
# Reports only; nothing is enforced and no accessor is changed.
# Values themselves are never copied into the report.
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Any, Dict, Mapping

from configuration.errors import error_payload
from configuration.types import Config, Present
from core.logging import log_event


def _check(config: Config) -> Dict[str, Any]:
    # RecursionError: deeply nested JSON arrays/objects
    try:
        result = config.read()
    except (ValueError, TypeError, RecursionError) as exc:
        return {"present": True, "valid": False, "message": str(exc) or type(exc).__name__}

    if isinstance(result, Present):
        return {"present": True, "valid": True, "message": "valid"}
    return {"present": False, "valid": True, "message": "missing (using defaults)"}


def audit_configs(configs: Mapping[str, Config]) -> Dict[str, Any]:
    """
    Audit a set of accessors keyed by a human description.

    ``validated`` is keyed by description, so two accessors bound to the same
    key are reported separately. Missing keys are warnings, malformed keys are
    critical issues. Emits a single ``config_audit`` log event with the summary.
    """
    results: Dict[str, Any] = {
        "status": "unknown",
        "critical_issues": [],
        "warnings": [],
        "errors": [],
        "validated": {},
        "summary": {},
    }

    for description, config in configs.items():
        entry = _check(config)
        entry["key"] = config.key
        results["validated"][description] = entry

        if not entry["valid"]:
            results["critical_issues"].append(f"{config.key}: {entry['message']}")
            results["errors"].append(
                error_payload(
                    "config_malformed",
                    entry["message"],
                    key=config.key,
                    hint="Use a JSON literal such as true or false",
                    extra={"description": description},
                )
            )
        elif not entry["present"]:
            results["warnings"].append(f"{config.key}: {entry['message']}")

    if results["critical_issues"]:
        results["status"] = "critical"
    elif results["warnings"]:
        results["status"] = "warnings"
    else:
        results["status"] = "healthy"

    results["summary"] = {
        "status": results["status"],
        "critical_issues": len(results["critical_issues"]),
        "warnings": len(results["warnings"]),
        "total_validated": len(results["validated"]),
    }

    log_event("config_audit", results["summary"])
    return results
