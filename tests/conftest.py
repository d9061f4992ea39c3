import pytest

from dms3ns.crypto.ed25519 import (
    create_new_key_pair as create_ed25519_key_pair,
)
from dms3ns.crypto.rsa import (
    create_new_key_pair as create_rsa_key_pair,
)
from dms3ns.crypto.secp256k1 import (
    create_new_key_pair as create_secp256k1_key_pair,
)
from dms3ns.peer.keybook import (
    KeyBook,
)

# Small keys keep RSA generation fast; size does not matter for these tests.
TEST_RSA_KEY_BITS = 1024


@pytest.fixture(scope="session")
def rsa_key_pair():
    return create_rsa_key_pair(TEST_RSA_KEY_BITS)


@pytest.fixture(scope="session")
def other_rsa_key_pair():
    return create_rsa_key_pair(TEST_RSA_KEY_BITS)


@pytest.fixture
def ed25519_key_pair():
    return create_ed25519_key_pair()


@pytest.fixture
def secp256k1_key_pair():
    return create_secp256k1_key_pair()


@pytest.fixture(params=["ed25519", "rsa", "secp256k1"])
def any_key_pair(request):
    return request.getfixturevalue(f"{request.param}_key_pair")


@pytest.fixture
def keybook():
    return KeyBook()
