from cryptography.hazmat.primitives import serialization, hashes
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography import x509
from cryptography.x509.oid import NameOID
import datetime
from pathlib import Path
import argparse


def build_self_signed(cn: str, key_size: int = 2048, days: int = 365, not_before: datetime.datetime = None):
    """Return (key, certificate) for a throwaway self-signed certificate."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)

    subject = issuer = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, cn)])
    if not_before is None:
        not_before = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=1)

    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_before)
        .not_valid_after(not_before + datetime.timedelta(days=days))
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )
    return key, cert


def gen_cert(cn: str, out_prefix: str, key_size: int = 2048, days: int = 365):
    key, cert = build_self_signed(cn, key_size=key_size, days=days)

    key_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    cert_pem = cert.public_bytes(serialization.Encoding.PEM)

    out_key = Path(out_prefix + '.key.pem')
    out_cert = Path(out_prefix + '.cert.pem')
    out_key.parent.mkdir(parents=True, exist_ok=True)
    out_key.write_bytes(key_pem)
    out_cert.write_bytes(cert_pem)

    print(f'Wrote key -> {out_key}\nWrote cert -> {out_cert}')
    return out_cert


if __name__ == '__main__':
    p = argparse.ArgumentParser()
    p.add_argument('--cn', required=True)
    p.add_argument('--out', required=True, help='prefix for output files (e.g. certs/test)')
    p.add_argument('--days', type=int, default=365)
    args = p.parse_args()
    gen_cert(args.cn, args.out, days=args.days)
