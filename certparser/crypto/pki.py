import binascii
import datetime
from typing import Optional

from cryptography import x509
from cryptography.x509.oid import NameOID

from certparser.common.config import CONFIG
from certparser.common.errors import CertParserError
from certparser.common.logging import get_logger
from certparser.common.utils import b64d, b64e, hex_digest, to_epoch
from certparser.crypto.pem import is_der, strip_pem, wrap_pem

log = get_logger(__name__)


class CertParser:
    """A single X.509 certificate, given as PEM text, bare base64 or DER bytes.

    The input is reduced to one unbroken base64 string and decoded with
    ``cryptography``; construction fails with ``CertParserError`` if that
    does not work, so accessors always have a decoded certificate to read.
    """

    def __init__(self, cert_data):
        if isinstance(cert_data, (bytes, bytearray)):
            if is_der(cert_data):
                cert_data = b64e(bytes(cert_data))
            else:
                try:
                    cert_data = bytes(cert_data).decode('ascii')
                except UnicodeDecodeError as e:
                    raise CertParserError('unable to parse the certificate') from e
        if not isinstance(cert_data, str):
            raise CertParserError('input should be string or bytes')

        self._stripped = strip_pem(cert_data)

        try:
            self._cert = x509.load_der_x509_certificate(self.to_der())
        except (binascii.Error, ValueError) as e:
            log.warning('unable to parse certificate: %s', e)
            raise CertParserError('unable to parse the certificate') from e
        log.debug('parsed certificate %s', self._cert.subject.rfc4514_string())

    @classmethod
    def from_file(cls, path):
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise CertParserError('unable to read file') from e
        return cls(data)

    @property
    def certificate(self) -> x509.Certificate:
        return self._cert

    def to_base64(self) -> str:
        return self._stripped

    def to_der(self) -> bytes:
        return b64d(self._stripped)

    def to_pem(self) -> str:
        return wrap_pem(self._stripped)

    def not_valid_before(self) -> int:
        """UNIX timestamp from which the certificate is valid."""
        return to_epoch(self._cert.not_valid_before_utc)

    def not_valid_after(self) -> int:
        """UNIX timestamp after which the certificate is no longer valid."""
        return to_epoch(self._cert.not_valid_after_utc)

    def is_valid_at(self, when=None) -> bool:
        # date window only; nothing about trust or revocation
        if when is None:
            when = datetime.datetime.now(datetime.timezone.utc)
        if isinstance(when, datetime.datetime):
            when = to_epoch(when)
        elif isinstance(when, bool) or not isinstance(when, (int, float)):
            raise CertParserError('moment should be a timestamp or datetime')
        return self.not_valid_before() <= when <= self.not_valid_after()

    def fingerprint(self, algorithm: Optional[str] = None) -> str:
        if algorithm is None:
            algorithm = CONFIG['fingerprint_algorithm']
        try:
            return hex_digest(algorithm, self.to_der())
        except ValueError as e:
            raise CertParserError(f"unsupported algorithm '{algorithm}'") from e

    def name(self) -> str:
        """The subject common name."""
        attrs = self._cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
        if not attrs:
            raise CertParserError('could not find common name')
        return attrs[0].value

    def subject(self) -> str:
        return self._cert.subject.rfc4514_string()


def load_cert(path) -> CertParser:
    return CertParser.from_file(path)
