import time
import random
import string
import datetime as dt


def create_id_with_prefix(prefix: str) -> str:
    # timestamp + 6 random chars
    stamp = int(time.time() * 1000)
    rand = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{prefix}_{stamp}_{rand}"


def utc_now_iso() -> str:
    """Returns the current UTC time in ISO 8601 format."""
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')
