from datetime import datetime
from typing import Optional


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Render ``moment`` (default: local now) as ``YYYY-M-D H:M:S``.

    No field is zero padded, so 5 March 2024 09:02:01 becomes
    ``2024-3-5 9:2:1``. Existing Channels rows use this form.
    """
    t = moment or datetime.now()
    return f"{t.year}-{t.month}-{t.day} {t.hour}:{t.minute}:{t.second}"
