"""
Controller for the snippet API.

Validates the request, resolves the session language and builds the text the
caller will hand to its REPL. Nothing here talks to a runtime.
"""

import logging
import os
from typing import Dict, Optional

from api.validation import validate_eval_request
from repl.harness import bootstrap, build_eval
from repl.lang import LangParseError, parse_lang

logger = logging.getLogger(__name__)

# Namespace used when the request doesn't name one.
DEFAULT_NS = os.environ.get("REPL_DEFAULT_NS", "user")


def generate_bootstrap(lang_tag: Optional[str] = None) -> Dict:
    """
    Return the bootstrap snippet. The text is the same for both languages; a
    tag is only checked when given.
    """
    if lang_tag is not None:
        try:
            parse_lang(lang_tag)
        except LangParseError as e:
            return {"result": None, "error": str(e)}

    return {"result": {"code": bootstrap()}, "error": None}


def generate_eval(data: Dict) -> Dict:
    """
    Validate an eval request and wrap its code for the requested language.
    """
    ok, err = validate_eval_request(data)
    if not ok:
        return {"result": None, "error": err}

    try:
        lang = parse_lang(data["lang"])
    except LangParseError as e:
        return {"result": None, "error": str(e)}

    ns = data.get("ns", DEFAULT_NS)
    snippet = build_eval(data["code"], ns, lang)
    logger.info("Built %s eval snippet for ns %s (%d chars)", lang.display_name, ns, len(snippet))

    return {"result": {"code": snippet, "lang": str(lang)}, "error": None}
