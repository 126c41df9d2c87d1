import datetime
import hashlib

import pytest

from certparser.common.utils import b64d, b64e, hex_digest, normalize_algorithm, to_epoch


def test_b64_roundtrip():
    assert b64d(b64e(b'\x30\x82\x01\x00')) == b'\x30\x82\x01\x00'


def test_b64d_rejects_garbage():
    with pytest.raises(ValueError):
        b64d('not*base64!')


@pytest.mark.parametrize('name,expected', [
    ('sha1', 'sha1'),
    ('SHA256', 'sha256'),
    ('SHA-256', 'sha256'),
    ('sha3-256', 'sha3_256'),
    (' md5 ', 'md5'),
])
def test_normalize_algorithm(name, expected):
    assert normalize_algorithm(name) == expected


def test_hex_digest():
    assert hex_digest('sha256', b'abc') == hashlib.sha256(b'abc').hexdigest()


@pytest.mark.parametrize('name', ['shake_128', 'whirlpool-ish', ''])
def test_hex_digest_unsupported(name):
    with pytest.raises(ValueError):
        hex_digest(name, b'abc')


def test_to_epoch_naive_is_utc():
    aware = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    assert to_epoch(aware) == 1704067200
    assert to_epoch(aware.replace(tzinfo=None)) == 1704067200
