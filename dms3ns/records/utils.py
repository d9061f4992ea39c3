from dms3ns.records.exceptions import (
    InvalidPath,
)


def split_key(key: str) -> tuple[str, str]:
    """
    Split a record key into its namespace and the rest. The key must start
    with '/' and contain another '/' to separate the namespace. Raises
    `InvalidPath` if the key is invalid.

    Args:
        key (str): The record key to split.

    Returns:
        tuple[str, str]: The namespace and the rest.

    """
    if not key or key[0] != "/":
        raise InvalidPath("Invalid record keytype")

    key = key[1:]

    i = key.find("/")
    if i <= 0:
        raise InvalidPath("Invalid record keytype")

    return key[:i], key[i + 1 :]
