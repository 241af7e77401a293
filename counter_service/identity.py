from collections import namedtuple
from datetime import datetime

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

ID_LENGTH = 8

Identity = namedtuple("Identity", ["instance_id", "color"])


def fnv1a_32(data):
    """32-bit FNV-1a hash of a byte string"""
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def derive_identity(seed):
    """Instance id and display color from the hash of a seed string"""
    h = fnv1a_32(seed.encode())
    instance_id = str(h)[:ID_LENGTH]
    color = f"#{h & 0xFFFFFF:06x}"
    return Identity(instance_id, color)


def load_identity(manual_id=None, now=None):
    """
    Identity for this process, computed once at startup.
    A manually configured id wins; the color always comes from the timestamp hash.
    """
    if now is None:
        now = datetime.now()
    identity = derive_identity(str(now))
    if manual_id:
        identity = identity._replace(instance_id=manual_id)
    return identity
