"""Field-level domain rules for project rows."""

from typing import Dict
from typing import Optional

from hackathon_api.sheets.schema import NIL

MORE_INFO_URL_PREFIXES = ("http://", "https://")


def validate_more_info(text: Optional[str]) -> Optional[Dict[str, str]]:
    """
    Validate the project's more_info field.

    Accepts an empty value, the unset sentinel, or anything starting with
    http:// or https://. Only the prefix is checked, not the URL grammar.

    Returns:
        None when valid, otherwise {"more_info": message}
    """
    if not text or text == NIL or text.strip() == "" or text.startswith(MORE_INFO_URL_PREFIXES):
        return None
    return {"more_info": "More info must be a URL"}
