"""
Value types shared across regutils.
"""
from dataclasses import dataclass, field
from typing import Dict, NamedTuple


@dataclass
class AuthConfig:
    """
    Credentials for a single container registry.
    """

    username: str = ""
    password: str = ""
    server_address: str = ""
    email: str = ""
    identity_token: str = ""

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return "AuthConfig(username={!r}, server_address={!r})".format(
            self.username, self.server_address
        )


@dataclass
class ConfigFile:
    """
    The credential related parts of a docker config.json.
    """

    auth_configs: Dict[str, AuthConfig] = field(default_factory=dict)
    credential_helpers: Dict[str, str] = field(default_factory=dict)
    credentials_store: str = ""
    filename: str = ""

    def contains_auth(self) -> bool:
        """
        Returns true if any credentials or credential helpers are configured.
        """
        return bool(
            self.credentials_store or self.credential_helpers or self.auth_configs
        )


class RepositoryReference(NamedTuple):
    """
    A repository name paired with a tag or digest.
    """

    repo: str
    ref: str
