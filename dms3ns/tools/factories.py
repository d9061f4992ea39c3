from datetime import (
    datetime,
    timedelta,
    timezone,
)
from typing import (
    Any,
)

import factory

from dms3ns import (
    generate_new_ed25519_identity,
    generate_peer_id_from,
)
from dms3ns.crypto.keys import (
    PrivateKey,
)
from dms3ns.peer.id import (
    ID,
)
from dms3ns.records.codec import (
    Record,
)
from dms3ns.records.entry import (
    create_record,
)

DEFAULT_VALUE = b"/dms3fs/QmfM2r8seH2GiRaC4esTjeraXEachRt8ZsSeGaWTPLyMoG"


def one_hour_from_now() -> datetime:
    return datetime.now(timezone.utc) + timedelta(hours=1)


class IDFactory(factory.Factory):
    class Meta:
        model = ID

    peer_id_bytes = factory.LazyFunction(
        lambda: generate_peer_id_from(generate_new_ed25519_identity()).to_bytes()
    )


class RecordFactory(factory.Factory):
    """
    Builds signed records. Pass ``private_key`` to sign with a known key;
    a fresh Ed25519 key is used otherwise.
    """

    class Meta:
        model = Record

    private_key = factory.LazyFunction(
        lambda: generate_new_ed25519_identity().private_key
    )
    value = DEFAULT_VALUE
    sequence = 1
    eol = factory.LazyFunction(one_hour_from_now)

    @classmethod
    def _create(
        cls,
        model_class: type[Record],
        private_key: PrivateKey,
        value: bytes,
        sequence: int,
        eol: datetime,
        **kwargs: Any,
    ) -> Record:
        return create_record(private_key, value, sequence, eol)

    @classmethod
    def _build(cls, model_class: type[Record], *args: Any, **kwargs: Any) -> Record:
        return cls._create(model_class, *args, **kwargs)
