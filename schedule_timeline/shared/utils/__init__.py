from schedule_timeline.shared.utils.datetime import (LATEST_INSTANT, add_days,
                                                     ensure_utc, shift,
                                                     utc_now)
from schedule_timeline.shared.utils.generators import generate_cuid
from schedule_timeline.shared.utils.sanitization import is_blank, slugify_status

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "add_days",
    "shift",
    "LATEST_INSTANT",
    "is_blank",
    "slugify_status",
]
