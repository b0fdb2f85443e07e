import re

from config import MAX_INPUT
from xsh.errors import CapacityError

# An empty name is allowed: a lone "$" expands to nothing
_VAR_RE = re.compile(r"\$([A-Za-z0-9_]*)")


def expand_variables(text, env, limit=MAX_INPUT):
    """
    Replace $NAME with env[NAME] ("" if unset).
    Raises CapacityError when text does not fit in `limit`.
    """
    if len(text) >= limit:
        raise CapacityError("argument too long")
    if "$" not in text:
        return text
    return _VAR_RE.sub(lambda m: env.get(m.group(1), "") if m.group(1) else "", text)
