from abc import (
    ABC,
    abstractmethod,
)

from dms3ns.crypto.keys import (
    PublicKey,
)

from .id import (
    ID,
)


class PeerStoreError(KeyError):
    """Raised when a key book does not hold the requested data."""


class IKeyBook(ABC):
    """
    Read side of a key store: public keys indexed by the ID they hash to.

    Implementations must be safe for concurrent reads; the record validator
    only ever calls ``pubkey``.
    """

    @abstractmethod
    def pubkey(self, peer_id: ID) -> PublicKey:
        """
        :param peer_id: peer ID to get public key for
        :return: public key of the peer
        :raise PeerStoreError: if peer ID or peer pubkey not found
        """


class KeyBook(IKeyBook):
    def __init__(self) -> None:
        self._pubkeys: dict[ID, PublicKey] = {}

    def add_pubkey(self, peer_id: ID, pubkey: PublicKey) -> None:
        """
        :param peer_id: peer ID to add public key for
        :param pubkey:
        :raise PeerStoreError: if peer ID and pubkey does not match
        """
        if ID.from_pubkey(pubkey) != peer_id:
            raise PeerStoreError("peer ID and pubkey does not match")
        self._pubkeys[peer_id] = pubkey

    def pubkey(self, peer_id: ID) -> PublicKey:
        try:
            return self._pubkeys[peer_id]
        except KeyError as e:
            raise PeerStoreError("peer pubkey not found") from e

    def peer_with_keys(self) -> list[ID]:
        """Returns the peer_ids for which keys are stored"""
        return list(self._pubkeys)

    def clear_keydata(self, peer_id: ID) -> None:
        self._pubkeys.pop(peer_id, None)
