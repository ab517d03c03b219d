"""
Credential stores that can be configured as docker credential helpers.
"""
import abc
import json
import logging
import re
import subprocess
from typing import Mapping, Tuple

from .exceptions import CredentialStoreError
from .models import AuthConfig

LOGGER = logging.getLogger(__name__)

HELPER_PREFIX = "docker-credential-"
TOKEN_USERNAME = "<token>"
NOT_FOUND_MESSAGE = "credentials not found in native keychain"


class CredentialStore(metaclass=abc.ABCMeta):
    """
    Abstract source of registry credentials backed by a named helper.
    """

    @abc.abstractmethod
    def resolve(self, helper: str, registry: str) -> AuthConfig:
        """
        Return the credentials stored by helper for registry, or empty
        credentials if it has none. Raises CredentialStoreError if the helper
        could not be queried; get_auth_config wraps any other error the same
        way.
        """


class DictCredentialStore(CredentialStore):
    """
    Credential store serving a fixed mapping of (helper, registry) to
    credentials. Unknown pairs yield empty credentials.
    """

    def __init__(self, creds: Mapping[Tuple[str, str], AuthConfig]) -> None:
        self.creds = creds

    def resolve(self, helper: str, registry: str) -> AuthConfig:
        return self.creds.get((helper, registry)) or AuthConfig()


class NativeCredentialStore(CredentialStore):
    """
    Queries docker-credential-* helper programs.

    See https://github.com/docker/docker-credential-helpers
    """

    @staticmethod
    def _query_helper(helper: str, registry: str) -> subprocess.CompletedProcess:
        """
        Run `docker-credential-<helper> get` with registry on stdin.
        """
        if not re.fullmatch(r"[A-Za-z0-9._-]+", helper):
            raise CredentialStoreError("invalid credential helper {!r}".format(helper))

        LOGGER.debug("Querying %s%s for %s", HELPER_PREFIX, helper, registry)
        try:
            return subprocess.run(
                [HELPER_PREFIX + helper, "get"],
                input=registry.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise CredentialStoreError(
                "could not run {}{}: {}".format(HELPER_PREFIX, helper, exc)
            ) from exc

    def resolve(self, helper: str, registry: str) -> AuthConfig:
        proc = self._query_helper(helper, registry)
        output = proc.stdout.decode("utf-8", "replace").strip()
        if proc.returncode != 0:
            if output == NOT_FOUND_MESSAGE:
                LOGGER.debug("%s has no credentials for %s", helper, registry)
                return AuthConfig()
            message = output or proc.stderr.decode("utf-8", "replace").strip()
            raise CredentialStoreError(
                "{}{} failed: {}".format(HELPER_PREFIX, helper, message)
            )

        try:
            reply = json.loads(output)
            username = reply["Username"]
            secret = reply["Secret"]
        except (ValueError, KeyError, TypeError) as exc:
            raise CredentialStoreError(
                "invalid reply from {}{}".format(HELPER_PREFIX, helper)
            ) from exc

        if username == TOKEN_USERNAME:
            return AuthConfig(server_address=registry, identity_token=secret)
        return AuthConfig(username=username, password=secret, server_address=registry)
