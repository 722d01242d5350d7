import random
import string
import uuid

import pytest

from cms.core.security import IdentityClaim
from cms.domains.resources.access import AccessPolicy, Decision, authorize


class Record:
    def __init__(self, owner_id):
        self.id = 1
        self.owner_id = owner_id


def random_id(rng: random.Random) -> str:
    if rng.random() < 0.5:
        return str(uuid.UUID(int=rng.getrandbits(128)))
    length = rng.randint(1, 24)
    return "".join(rng.choice(string.ascii_letters + string.digits + "-_") for _ in range(length))


def test_owner_is_allowed():
    assert authorize(IdentityClaim("u-1", "a@example.com"), Record("u-1")) is Decision.ALLOW


def test_other_user_is_denied():
    assert authorize(IdentityClaim("u-2", "b@example.com"), Record("u-1")) is Decision.DENY


def test_comparison_is_case_sensitive():
    assert authorize(IdentityClaim("User-1", "a@example.com"), Record("user-1")) is Decision.DENY


def test_record_without_owner_is_denied():
    assert authorize(IdentityClaim("u-1", "a@example.com"), Record(None)) is Decision.DENY


def test_email_plays_no_part_in_the_decision():
    assert authorize(IdentityClaim("u-1", "other@example.com"), Record("u-1")) is Decision.ALLOW


@pytest.mark.parametrize("seed", range(5))
def test_allow_iff_ids_match_for_random_ids(seed):
    rng = random.Random(seed)
    for _ in range(200):
        user_id = random_id(rng)
        owner_id = user_id if rng.random() < 0.5 else random_id(rng)

        decision = authorize(IdentityClaim(user_id, "x@example.com"), Record(owner_id))

        assert (decision is Decision.ALLOW) == (user_id == owner_id)


def test_policy_identity_requirements():
    assert not AccessPolicy.PUBLIC.requires_identity
    assert AccessPolicy.AUTHENTICATED.requires_identity
    assert AccessPolicy.OWNER.requires_identity
    assert AccessPolicy("none") is AccessPolicy.PUBLIC
