"""
Expose public regutils interface
"""
from .auth import get_auth_config
from .config import config_dir, load_config, parse_config
from .credentials import (
    CredentialStore,
    DictCredentialStore,
    NativeCredentialStore,
)
from .exceptions import (
    ConfigLoadError,
    CredentialStoreError,
    MissingArgumentError,
    NoCredentialsError,
    NoCredentialsFoundError,
    RegistryNotFoundError,
    RegUtilsException,
)
from .models import AuthConfig, ConfigFile, RepositoryReference
from .parsing import get_repo_and_ref
