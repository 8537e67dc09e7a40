"""
Request validation for the snippet API.

Only the shape of the payload is checked here. Code is never parsed and the
namespace is passed through verbatim; the REPL is the one that complains about
bad Clojure or a malformed namespace.
"""

from typing import Tuple, Optional, Any, Dict

# Tunable limits
MAX_CODE_SIZE = 200 * 1024  # 200 KB

REQUIRED_FIELDS = ("code", "lang")


def validate_eval_request(data: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a POST /eval body.

    Returns (True, None) if valid, otherwise (False, "<error message>").
    """
    if not isinstance(data, dict):
        return False, "JSON body must be an object."

    for field in REQUIRED_FIELDS:
        if field not in data:
            return False, f"Missing required field '{field}' in JSON body."

    code = data.get("code")
    if not isinstance(code, str):
        return False, "'code' must be a string."
    if len(code) > MAX_CODE_SIZE:
        return False, f"Code too large (>{MAX_CODE_SIZE} bytes)."

    if not isinstance(data.get("lang"), str):
        return False, "'lang' must be a string."

    if "ns" in data and not isinstance(data["ns"], str):
        return False, "'ns' must be a string."

    return True, None


def validate_bootstrap_request(args: Dict[str, str]) -> Tuple[bool, Optional[str]]:
    """
    GET /bootstrap takes an optional ?lang= only so clients can fail fast on a
    bad session tag before any code is sent.
    """
    unknown = sorted(set(args) - {"lang"})
    if unknown:
        return False, f"Unexpected query parameters: {', '.join(unknown)}"
    return True, None
