"""Print validity window, fingerprint and common name of a certificate file."""
import argparse
import datetime
import sys
from pathlib import Path

from certparser.common.config import CONFIG
from certparser.common.errors import CertParserError
from certparser.common.logging import get_logger, setup_logging
from certparser.crypto.pki import load_cert

log = get_logger('inspect_cert')


def iso_utc(ts: int) -> str:
    return datetime.datetime.fromtimestamp(ts, datetime.timezone.utc).isoformat()


def inspect_cert(cert_path: Path, algorithm: str, pem: bool = False):
    cert = load_cert(cert_path)
    if pem:
        print(cert.to_pem(), end='')
        return

    try:
        print(f'Common Name : {cert.name()}')
    except CertParserError:
        print(f'Subject     : {cert.subject()}')
    before = cert.not_valid_before()
    after = cert.not_valid_after()
    print(f'Not Before  : {before} ({iso_utc(before)})')
    print(f'Not After   : {after} ({iso_utc(after)})')
    print(f'Fingerprint : {algorithm}:{cert.fingerprint(algorithm)}')


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description='Inspect an X.509 certificate (PEM, base64 or DER)')
    p.add_argument('cert_path', help='path to the certificate file')
    p.add_argument('--algorithm', default=CONFIG['fingerprint_algorithm'],
                   help='fingerprint hash algorithm (default: %(default)s)')
    p.add_argument('--pem', action='store_true', help='print the normalized PEM instead')
    args = p.parse_args(argv)
    setup_logging()

    cert_path = Path(args.cert_path)
    if not cert_path.exists():
        print(f'ERROR: Certificate file not found: {cert_path}')
        return 1
    try:
        inspect_cert(cert_path, args.algorithm, pem=args.pem)
    except CertParserError as e:
        log.debug('inspect failed for %s', cert_path, exc_info=True)
        print(f'ERROR: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
