"""
Runtime defaults, read from the environment at import time.
"""
import os


CONFIG = {
    'fingerprint_algorithm': os.environ.get('CERTPARSER_FINGERPRINT_ALG', 'sha1'),
    'log_level': os.environ.get('CERTPARSER_LOG_LEVEL', 'INFO'),
}
