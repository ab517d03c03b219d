"""
Exceptions raised by regutils.
"""


class RegUtilsException(Exception):
    """
    Base class for all regutils errors.
    """


class ConfigLoadError(RegUtilsException):
    """
    The docker config file could not be read or parsed.
    """


class NoCredentialsError(RegUtilsException):
    """
    The config holds no stored auths and no registry was given.
    """


class RegistryNotFoundError(RegUtilsException):
    """
    No credentials exist for the requested registry.
    """


class CredentialStoreError(RegUtilsException):
    """
    A credential helper could not be queried.
    """


class NoCredentialsFoundError(RegUtilsException):
    """
    The auth mapping was empty when picking default credentials.
    """


class MissingArgumentError(RegUtilsException):
    """
    No repository argument was supplied.
    """
