"""
PEM armor handling. Only the CERTIFICATE label is recognised; the body is
treated as opaque base64 and never decoded here.
"""
import re


PEM_HEADER = '-----BEGIN CERTIFICATE-----'
PEM_FOOTER = '-----END CERTIFICATE-----'
PEM_LINE_LENGTH = 64

_ARMOR_RE = re.compile(r'-+(?:BEGIN|END) CERTIFICATE-+')
# space, tab, LF, CR, NUL, VT
_WHITESPACE_RE = re.compile('[ \t\n\r\x00\x0b]')

ASN1_SEQUENCE = 0x30


def strip_pem(text: str) -> str:
    text = _ARMOR_RE.sub('', text)
    return _WHITESPACE_RE.sub('', text)


def wrap_pem(b64: str, width: int = PEM_LINE_LENGTH) -> str:
    lines = [b64[i:i + width] for i in range(0, len(b64), width)]
    return PEM_HEADER + '\n' + '\n'.join(lines) + '\n' + PEM_FOOTER + '\n'


def is_der(data: bytes) -> bool:
    # a certificate is a SEQUENCE; its base64 starts with 'M' and PEM with '-'
    return len(data) > 0 and data[0] == ASN1_SEQUENCE
