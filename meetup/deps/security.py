# meetup/deps/security.py
import json
import logging
from typing import Optional

from fastapi import Header, HTTPException, status
from pydantic import ValidationError

from meetup.schemas import CallerUser

logger = logging.getLogger("security")


def parse_user_header(raw: Optional[str]) -> CallerUser:
    """Decode the JSON user object set by the upstream auth gateway.

    Only the shape is checked; signatures and expiry are the gateway's job.
    """
    if not raw:
        raise ValueError("missing X-User header")
    return CallerUser.model_validate(json.loads(raw))


def get_current_user(x_user: Optional[str] = Header(None, alias="X-User")) -> CallerUser:
    """401 unless X-User carries a user object with an integer id."""
    try:
        return parse_user_header(x_user)
    except (ValueError, ValidationError) as exc:
        logger.warning("Rejected X-User header: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
