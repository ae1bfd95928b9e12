import secrets
import string

from payu_bridge.utils.time import epoch_millis

TRANSACTION_ID_PREFIX = "TXN"
RANDOM_ALPHABET = string.digits + string.ascii_lowercase
RANDOM_LENGTH = 9


def generate_transaction_id() -> str:
    """Return a fresh ``TXN_<epoch ms>_<9 base36 chars>`` correlation id.

    Uniqueness is probabilistic: ids generated within the same millisecond
    differ only by their 36**9 random suffix. Nothing is reserved or stored.
    """
    suffix = "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(RANDOM_LENGTH))
    return f"{TRANSACTION_ID_PREFIX}_{epoch_millis()}_{suffix}"
