import time
import random
import string

_ALPHABET = string.ascii_lowercase + string.digits


def create_id_with_prefix(prefix: str) -> str:
    # timestamp + 4 random chars
    stamp = int(time.time() * 1000)
    rand = ''.join(random.choices(_ALPHABET, k=4))
    return f"{prefix}_{stamp}_{rand}"


def random_token(k: int = 13) -> str:
    """Short lowercase token used for uploaded object names."""
    return ''.join(random.choices(_ALPHABET, k=k))
