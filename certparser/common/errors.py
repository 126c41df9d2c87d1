class CertParserError(ValueError):
    """Raised for any certificate input that cannot be normalized, decoded or queried."""
