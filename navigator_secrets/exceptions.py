"""Navigator Secrets exceptions."""


class SecretsError(Exception):
    """Base class for all navigator-secrets errors."""


class CryptoError(SecretsError):
    """Key construction, sealing or opening of a secret failed.

    Always fatal for the invocation that raised it: no record, key or
    partial ciphertext is returned alongside.
    """
