"""Request dependencies shared by the routers."""

import os
import re

from fastapi import Header, HTTPException

DEFAULT_SESSION_ID = os.environ.get("DEFAULT_SESSION_ID", "anonymous")
SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def get_session_id(
    x_session_id: str = Header(DEFAULT_SESSION_ID, alias="X-Session-Id"),
) -> str:
    # Session ids become file names under DATA_DIR
    if not SESSION_ID_PATTERN.match(x_session_id):
        raise HTTPException(status_code=400, detail="Invalid X-Session-Id header")
    return x_session_id
