"""Порядок проверок сервиса ресурсов на хранилище в памяти."""

import itertools

import pytest

from cms.core.errors import (
    AuthenticationRequired, AuthorizationDenied, InvalidIdentifier, NotFound, ValidationFailed
)
from cms.domains.blogs.entities import Blog
from cms.domains.blogs.schemas import BlogPayload
from cms.domains.blogs.services import BLOG_LABELS
from cms.core.security import IdentityClaim
from cms.domains.resources.access import AccessPolicy
from cms.domains.resources.services import MAX_RECORD_ID, ResourceService, parse_record_id

VALID_BODY = b'{"title": "T", "content": "C"}'
INVALID_BODY = b'{"title": ""}'

ALICE = IdentityClaim("alice", "alice@example.com")
BOB = IdentityClaim("bob", "bob@example.com")


class InMemoryStore:
    """Хранилище записей блога в памяти; считает обращения"""

    def __init__(self):
        self.records = {}
        self.calls = []
        self._ids = itertools.count(1)

    async def insert(self, fields):
        self.calls.append("insert")
        record = Blog(id=next(self._ids), **fields)
        self.records[record.id] = record
        return record

    async def find_by_id(self, record_id):
        self.calls.append("find_by_id")
        return self.records.get(record_id)

    async def update(self, record_id, fields):
        self.calls.append("update")
        record = self.records.get(record_id)
        if record is None:
            return None
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    async def delete(self, record_id):
        self.calls.append("delete")
        return self.records.pop(record_id, None) is not None

    async def list_all(self):
        self.calls.append("list_all")
        return sorted(self.records.values(), key=lambda r: r.id, reverse=True)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return ResourceService(store=store, schema=BlogPayload, labels=BLOG_LABELS)


@pytest.fixture
async def alices_blog(service, store):
    record = await service.create(ALICE, VALID_BODY)
    store.calls.clear()
    return record


async def test_create_sets_owner_from_identity(service):
    record = await service.create(ALICE, b'{"title": "T", "content": "C", "ownerId": "bob", "owner_id": "bob"}')

    assert record.owner_id == "alice"
    assert record.image_url is None


async def test_create_without_identity_is_rejected_before_validation(service, store):
    with pytest.raises(AuthenticationRequired):
        await service.create(None, INVALID_BODY)
    assert store.calls == []


async def test_create_with_invalid_body_does_not_write(service, store):
    with pytest.raises(ValidationFailed) as exc_info:
        await service.create(ALICE, INVALID_BODY)

    assert [d.field for d in exc_info.value.details] == ["title", "content"]
    assert store.calls == []


async def test_unauthenticated_update_wins_over_every_other_failure(service, store, alices_blog):
    # Чужая запись, неверный id и неверное тело: первой проверяется сессия
    for raw_id in ("abc", "999", str(alices_blog.id)):
        with pytest.raises(AuthenticationRequired):
            await service.update(None, raw_id, INVALID_BODY)
    assert store.calls == []


async def test_invalid_id_is_rejected_before_store_access(service, store):
    with pytest.raises(InvalidIdentifier) as exc_info:
        await service.update(ALICE, "abc", VALID_BODY)

    assert exc_info.value.message == "Invalid blog ID"
    assert store.calls == []


async def test_missing_record_is_not_found_before_validation(service):
    with pytest.raises(NotFound) as exc_info:
        await service.update(ALICE, "999", INVALID_BODY)

    assert not isinstance(exc_info.value, InvalidIdentifier)
    assert exc_info.value.message == "Blog not found"


async def test_ownership_is_checked_before_validation(service, store, alices_blog):
    with pytest.raises(AuthorizationDenied) as exc_info:
        await service.update(BOB, str(alices_blog.id), INVALID_BODY)

    assert exc_info.value.message == "You can only edit your own blogs"
    assert "update" not in store.calls


async def test_owner_update_with_invalid_body_does_not_write(service, store, alices_blog):
    with pytest.raises(ValidationFailed):
        await service.update(ALICE, str(alices_blog.id), INVALID_BODY)

    assert "update" not in store.calls


async def test_owner_update_keeps_owner(service, alices_blog):
    updated = await service.update(ALICE, str(alices_blog.id), b'{"title": "New", "content": "Body", "ownerId": "bob"}')

    assert updated.title == "New"
    assert updated.owner_id == "alice"


async def test_non_owner_delete_is_denied(service, store, alices_blog):
    with pytest.raises(AuthorizationDenied) as exc_info:
        await service.delete(BOB, str(alices_blog.id))

    assert exc_info.value.message == "You can only delete your own blogs"
    assert alices_blog.id in store.records


async def test_owner_delete_removes_record(service, store, alices_blog):
    await service.delete(ALICE, str(alices_blog.id))

    assert store.records == {}


async def test_record_removed_between_check_and_write_is_not_found(service, store, alices_blog):
    original_update = store.update

    async def update_after_concurrent_delete(record_id, fields):
        store.records.pop(record_id)
        return await original_update(record_id, fields)

    store.update = update_after_concurrent_delete

    with pytest.raises(NotFound):
        await service.update(ALICE, str(alices_blog.id), VALID_BODY)


async def test_public_policy_allows_anonymous_mutation(store):
    service = ResourceService(store=store, schema=BlogPayload, labels=BLOG_LABELS, policy=AccessPolicy.PUBLIC)

    record = await service.create(None, VALID_BODY)
    await service.update(None, str(record.id), b'{"title": "X", "content": "Y"}')

    assert record.owner_id is None
    assert record.title == "X"


async def test_authenticated_policy_skips_ownership(store):
    service = ResourceService(
        store=store, schema=BlogPayload, labels=BLOG_LABELS, policy=AccessPolicy.AUTHENTICATED
    )
    record = await service.create(ALICE, VALID_BODY)

    with pytest.raises(AuthenticationRequired):
        await service.delete(None, str(record.id))
    await service.delete(BOB, str(record.id))

    assert store.records == {}


@pytest.mark.parametrize("raw_id", ["abc", "", "1.5", "0", "-1", "+1", " 1", "1_000", str(MAX_RECORD_ID + 1), "1e3"])
def test_parse_record_id_rejects(raw_id):
    with pytest.raises(InvalidIdentifier):
        parse_record_id(raw_id, BLOG_LABELS)


@pytest.mark.parametrize("raw_id,expected", [("1", 1), ("42", 42), (str(MAX_RECORD_ID), MAX_RECORD_ID)])
def test_parse_record_id_accepts(raw_id, expected):
    assert parse_record_id(raw_id, BLOG_LABELS) == expected
