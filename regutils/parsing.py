"""
Parsing of repository arguments.
"""
from typing import Sequence

from .exceptions import MissingArgumentError
from .models import RepositoryReference

DEFAULT_REF = "latest"


def get_repo_and_ref(args: Sequence[str]) -> RepositoryReference:
    """
    Split the first of args into a repository name and a tag or digest
    reference. Digest separators ('@') take precedence over tag separators
    (':'). The ref defaults to "latest" when neither is present.

    Every occurrence of the separator is split on and only the first two
    parts are kept, e.g. "host:5000/img:tag" => ("host", "5000/img").
    """
    if not args:
        raise MissingArgumentError("pass the name of the repository")

    arg = args[0]
    if "@" in arg:
        parts = arg.split("@")
    elif ":" in arg:
        parts = arg.split(":")
    else:
        parts = [arg]

    ref = parts[1] if len(parts) > 1 else DEFAULT_REF
    return RepositoryReference(parts[0], ref)
