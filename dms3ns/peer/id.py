import base58
import multihash

from dms3ns.crypto.keys import (
    PublicKey,
)
from dms3ns.crypto.serialization import (
    deserialize_public_key,
)

# NOTE: keys whose serialization fits in ``MAX_INLINE_KEY_LENGTH`` bytes are
# inlined into the ID with the identity multihash, which lets a verifier
# recover the key from the ID alone.
ENABLE_INLINING = True
MAX_INLINE_KEY_LENGTH = 42

IDENTITY_MULTIHASH_CODE = 0x00

if ENABLE_INLINING:

    class IdentityHash:
        _digest: bytes

        def __init__(self) -> None:
            self._digest = b""

        def update(self, input: bytes) -> None:
            self._digest += input

        def digest(self) -> bytes:
            return self._digest

    multihash.FuncReg.register(
        IDENTITY_MULTIHASH_CODE, "identity", hash_new=lambda: IdentityHash()
    )


class ID:
    """
    A stable identifier derived from a public key.

    The raw form is a multihash of the serialized public key. ``str(id)``
    gives the base58 form, ``to_hex`` the form used in record keys.
    """

    _bytes: bytes
    _b58_str: str | None = None

    def __init__(self, peer_id_bytes: bytes) -> None:
        self._bytes = peer_id_bytes

    def to_bytes(self) -> bytes:
        return self._bytes

    def to_hex(self) -> str:
        return self._bytes.hex()

    def to_base58(self) -> str:
        if not self._b58_str:
            self._b58_str = base58.b58encode(self._bytes).decode()
        return self._b58_str

    def __repr__(self) -> str:
        return f"<dms3ns.peer.id.ID ({self!s})>"

    __str__ = to_base58

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.to_base58() == other
        elif isinstance(other, bytes):
            return self._bytes == other
        elif isinstance(other, ID):
            return self._bytes == other._bytes
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def extract_public_key(self) -> PublicKey | None:
        """
        Recover the public key inlined in this ID.

        Returns ``None`` for hashed IDs, which carry no key material.

        :raise ValueError: if the ID is not a multihash
        """
        mh = multihash.decode(self._bytes)
        if mh.func != IDENTITY_MULTIHASH_CODE:
            return None
        return deserialize_public_key(mh.digest)

    @classmethod
    def from_base58(cls, b58_encoded_peer_id_str: str) -> "ID":
        peer_id_bytes = base58.b58decode(b58_encoded_peer_id_str)
        return cls(peer_id_bytes)

    @classmethod
    def from_hex(cls, hex_peer_id_str: str) -> "ID":
        """
        :raise ValueError: if the string is not hex or not a multihash
        """
        return cls.from_bytes(bytes.fromhex(hex_peer_id_str))

    @classmethod
    def from_bytes(cls, peer_id_bytes: bytes) -> "ID":
        """
        Build an ID from raw bytes, checking that they form a multihash.

        :raise ValueError: if ``peer_id_bytes`` is not a multihash
        """
        try:
            multihash.decode(peer_id_bytes)
        except Exception as e:
            raise ValueError(f"not a multihash: {e}") from e
        return cls(peer_id_bytes)

    @classmethod
    def from_pubkey(cls, key: PublicKey) -> "ID":
        serialized_key = key.serialize()
        algo = multihash.Func.sha2_256
        if ENABLE_INLINING and len(serialized_key) <= MAX_INLINE_KEY_LENGTH:
            algo = IDENTITY_MULTIHASH_CODE
        mh_digest = multihash.digest(serialized_key, algo)
        return cls(mh_digest.encode())
