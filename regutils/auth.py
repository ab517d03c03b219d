"""
Resolution of registry credentials from flags and the docker config.
"""
import dataclasses
import logging
from typing import Optional

from .config import config_dir as default_config_dir, load_config
from .credentials import CredentialStore, NativeCredentialStore
from .exceptions import (
    ConfigLoadError,
    CredentialStoreError,
    NoCredentialsError,
    NoCredentialsFoundError,
    RegistryNotFoundError,
)
from .models import AuthConfig, ConfigFile

LOGGER = logging.getLogger(__name__)


def get_auth_config(
    username: Optional[str] = None,
    password: Optional[str] = None,
    registry: Optional[str] = None,
    config_dir: Optional[str] = None,
    cred_store: Optional[CredentialStore] = None,
) -> AuthConfig:
    """
    Returns the credentials to use for a registry.

    Order of precedence:
    1. username, password and registry all given explicitly
    2. with no stored auths at all, anonymous access to registry
    3. the credential helper configured for registry
    4. the auths entry for registry
    5. with no registry, the first auths entry in the config file
    """
    config_dir = config_dir or default_config_dir()
    cred_store = cred_store or NativeCredentialStore()

    try:
        dcfg = load_config(config_dir)
    except ConfigLoadError as exc:
        raise ConfigLoadError("Loading config file failed: {}".format(exc)) from exc

    if username and password and registry:
        LOGGER.debug("Using explicit credentials for %s", registry)
        return AuthConfig(username=username, password=password, server_address=registry)

    # Fail early if there are no auths saved.
    if not dcfg.contains_auth():
        if registry:
            LOGGER.debug("No stored auths, using anonymous access to %s", registry)
            return AuthConfig(server_address=registry)
        raise NoCredentialsError(
            "No auth was present in {}, please pass a registry, username, "
            "and password".format(config_dir)
        )

    if registry:
        store = _get_configured_credential_store(dcfg, registry)
        if store:
            LOGGER.debug("Using credential helper %s for %s", store, registry)
            try:
                creds = cred_store.resolve(store, registry)
            except Exception as exc:
                raise CredentialStoreError(
                    "Unable to retrieve auth from credential store: {}".format(exc)
                ) from exc
            if not (creds.username or creds.password or creds.identity_token):
                raise RegistryNotFoundError(
                    "No authentication credentials exist for {}".format(registry)
                )
            return dataclasses.replace(creds, server_address=registry)

        creds = dcfg.auth_configs.get(registry)
        if creds is not None:
            return creds
        raise RegistryNotFoundError(
            "No authentication credentials exist for {}".format(registry)
        )

    # Any stored credential will do; take the first in file order.
    for server, creds in dcfg.auth_configs.items():
        LOGGER.debug("No registry given, using credentials for %s", server)
        return creds

    raise NoCredentialsFoundError("Could not find any authentication credentials")


def _get_configured_credential_store(dcfg: ConfigFile, server_address: str) -> str:
    """
    Returns the credential helper configured for server_address, the default
    credsStore, or the empty string if neither is configured.
    """
    if server_address and server_address in dcfg.credential_helpers:
        return dcfg.credential_helpers[server_address]
    return dcfg.credentials_store
