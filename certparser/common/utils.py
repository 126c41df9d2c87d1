import base64
import datetime
import hashlib


# fixed-length digests only; shake_* needs an output length
DIGEST_ALGORITHMS = frozenset(
    a for a in hashlib.algorithms_guaranteed if not a.startswith('shake_')
)


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode()


def b64d(s: str) -> bytes:
    return base64.b64decode(s, validate=True)


def normalize_algorithm(name: str) -> str:
    # accept 'SHA-256' and 'sha3-256' as well as the hashlib spellings
    alg = name.strip().lower().replace('-', '_')
    if alg not in DIGEST_ALGORITHMS and alg.replace('_', '') in DIGEST_ALGORITHMS:
        alg = alg.replace('_', '')
    return alg


def hex_digest(algorithm: str, b: bytes) -> str:
    alg = normalize_algorithm(algorithm)
    if alg not in DIGEST_ALGORITHMS:
        raise ValueError(algorithm)
    return hashlib.new(alg, b).hexdigest()


def to_epoch(dt: datetime.datetime) -> int:
    # naive datetimes are taken as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return int(dt.timestamp())
