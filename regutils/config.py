"""
Loading of the docker CLI config file.

See https://docs.docker.com/engine/reference/commandline/cli/#configuration-files
"""
import base64
import binascii
import json
import logging
import os
from typing import Any, Dict, Tuple

from .exceptions import ConfigLoadError
from .models import AuthConfig, ConfigFile

LOGGER = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def config_dir() -> str:
    """
    Returns the default docker config directory. $DOCKER_CONFIG takes
    precedence over ~/.docker.
    """
    return os.environ.get("DOCKER_CONFIG") or os.path.join(
        os.path.expanduser("~"), ".docker"
    )


def _decode_auth(auth: str) -> Tuple[str, str]:
    """
    Decodes a base64 "user:password" auth field.
    """
    if not auth:
        return ("", "")
    try:
        decoded = base64.b64decode(auth, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError("invalid auth encoding") from exc

    user, sep, password = decoded.partition(":")
    if not sep:
        raise ValueError("invalid auth configuration")
    return (user, password.strip("\x00"))


def _typed(content: Dict[str, Any], key: str, kind: type, filename: str) -> Any:
    """
    Returns content[key] or an empty kind, raising ConfigLoadError if the
    value is present with the wrong type.
    """
    value = content.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ConfigLoadError(
            "{}: {} must be a {}".format(filename, key, kind.__name__)
        )
    return value


def parse_config(content: Dict[str, Any], filename: str = "") -> ConfigFile:
    """
    Build a ConfigFile from the decoded JSON content of a config.json.
    """
    if not isinstance(content, dict):
        raise ConfigLoadError("{}: expected a JSON object".format(filename))

    auth_configs: Dict[str, AuthConfig] = {}
    for server, entry in _typed(content, "auths", dict, filename).items():
        if not isinstance(entry, dict):
            raise ConfigLoadError(
                "{}: malformed auth entry for {}".format(filename, server)
            )
        fields = {
            key: _typed(entry, key, str, "{} ({})".format(filename, server))
            for key in ("auth", "username", "password", "email", "identitytoken")
        }
        try:
            username, password = _decode_auth(fields["auth"])
        except ValueError as exc:
            raise ConfigLoadError(
                "{}: {} for {}".format(filename, exc, server)
            ) from exc

        auth_configs[server] = AuthConfig(
            username=username or fields["username"],
            password=password or fields["password"],
            server_address=server,
            email=fields["email"],
            identity_token=fields["identitytoken"],
        )

    cred_helpers = _typed(content, "credHelpers", dict, filename)
    for server, helper in cred_helpers.items():
        if not isinstance(helper, str):
            raise ConfigLoadError(
                "{}: malformed credential helper for {}".format(filename, server)
            )

    return ConfigFile(
        auth_configs=auth_configs,
        credential_helpers=dict(cred_helpers),
        credentials_store=_typed(content, "credsStore", str, filename),
        filename=filename,
    )


def load_config(directory: str) -> ConfigFile:
    """
    Load config.json from directory. A missing file yields an empty config;
    any other failure raises ConfigLoadError.
    """
    filename = os.path.join(directory, CONFIG_FILE_NAME)
    try:
        with open(filename, "r", encoding="utf-8") as fconfig:
            content = json.load(fconfig)
    except FileNotFoundError:
        LOGGER.debug("No config file at %s", filename)
        return ConfigFile(filename=filename)
    except (OSError, ValueError) as exc:
        raise ConfigLoadError("{}: {}".format(filename, exc)) from exc

    LOGGER.debug("Loaded config file %s", filename)
    return parse_config(content, filename)
