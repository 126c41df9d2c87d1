import datetime

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

NOT_BEFORE = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
NOT_AFTER = datetime.datetime(2034, 1, 1, tzinfo=datetime.timezone.utc)
NOT_BEFORE_TS = 1704067200
NOT_AFTER_TS = 2019686400


@pytest.fixture(scope='session')
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def make_cert(key, attrs):
    name = x509.Name([x509.NameAttribute(oid, value) for oid, value in attrs])
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(NOT_BEFORE)
        .not_valid_after(NOT_AFTER)
        .sign(key, hashes.SHA256())
    )


@pytest.fixture(scope='session')
def cert(rsa_key):
    return make_cert(rsa_key, [
        (NameOID.COUNTRY_NAME, 'NL'),
        (NameOID.ORGANIZATION_NAME, 'Test Org'),
        (NameOID.COMMON_NAME, 'example.test'),
    ])


@pytest.fixture(scope='session')
def cert_without_cn(rsa_key):
    return make_cert(rsa_key, [(NameOID.ORGANIZATION_NAME, 'No CN Org')])


@pytest.fixture(scope='session')
def der(cert):
    return cert.public_bytes(serialization.Encoding.DER)


@pytest.fixture(scope='session')
def pem(cert):
    return cert.public_bytes(serialization.Encoding.PEM).decode()


@pytest.fixture
def pem_file(tmp_path, pem):
    path = tmp_path / 'cert.pem'
    path.write_text(pem)
    return path
