import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

import wellbeing.models  # noqa: F401  (테이블 등록)
from conftest import FailingSession
from wellbeing.database import Base, build_engine
from wellbeing.schemas.users import UserCreateRequest, UserUpdateRequest
from wellbeing.services.data_source import (
    DATA_SOURCE_DATABASE,
    DATA_SOURCE_NOT_CONFIGURED,
    DATA_SOURCE_UNAVAILABLE,
    FallbackRepository,
)
from wellbeing.services.mood_store import MoodStore
from wellbeing.services.recommendation_catalog import RecommendationCatalog
from wellbeing.services.seed_service import seed_database
from wellbeing.services.user_service import DuplicateUsernameError, UserService
from wellbeing.utils.constants import RECOMMENDATION_CATALOG, SEED_PASSWORD


def run_with_db(tmp_path, scenario):
    """Run `scenario(session)` against a fresh, seeded SQLite file."""
    async def _run():
        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
        try:
            async with session_factory() as db:
                await seed_database(db)
            async with session_factory() as db:
                return await scenario(db)
        finally:
            await engine.dispose()

    return asyncio.run(_run())


# static 모드

def test_static_mood_history_for_any_user():
    store = MoodStore(None)

    moods = asyncio.run(store.get_by_user(42))

    assert len(moods) == 7
    assert {m.user_id for m in moods} == {42}
    assert store.data_source == DATA_SOURCE_NOT_CONFIGURED


def test_static_record_is_echoed_not_stored():
    store = MoodStore(None)

    entry = asyncio.run(store.record(1, 9, "clamped"))
    all_moods = asyncio.run(store.get_all())

    assert entry.id == 11
    assert entry.score == 5
    assert len(all_moods) == 10


def test_static_delete_and_lookup():
    store = MoodStore(None)

    assert asyncio.run(store.delete(3)) is True
    assert asyncio.run(store.delete(999)) is False
    assert asyncio.run(store.get_by_id(999)) is None


def test_static_users_and_login():
    service = UserService(None)

    users, data_source = asyncio.run(service.list_users())
    admin = asyncio.run(service.authenticate("admin", SEED_PASSWORD))

    assert [u.username for u in users] == ["admin", "john", "emily"]
    assert data_source == DATA_SOURCE_NOT_CONFIGURED
    assert admin.is_admin is True
    assert asyncio.run(service.authenticate("admin", "wrong")) is None


def test_static_create_user_does_not_touch_seed():
    service = UserService(None)

    created = asyncio.run(service.create(UserCreateRequest(name="Jane Doe")))

    assert created.id == 4
    assert created.username == "jane.doe"
    assert created.email == "jane.doe@company.com"
    assert created.department == "General"
    assert asyncio.run(service.count()) == 3


def test_static_duplicate_username():
    with pytest.raises(DuplicateUsernameError):
        asyncio.run(UserService(None).create(UserCreateRequest(name="x", username="john")))


# DB 장애

def test_database_error_falls_back_to_static_data():
    session = FailingSession()
    store = MoodStore(session)

    moods = asyncio.run(store.get_by_user(1))

    assert len(moods) == 7
    assert store.data_source == DATA_SOURCE_UNAVAILABLE
    assert session.rolled_back is True


def test_catalog_falls_back_when_database_fails():
    catalog = RecommendationCatalog(FailingSession())

    items = asyncio.run(catalog.get_all())

    assert len(items) == len(RECOMMENDATION_CATALOG)
    assert catalog.data_source == DATA_SOURCE_UNAVAILABLE


def test_slow_database_times_out():
    class SlowRepository(FallbackRepository):
        async def fetch(self):
            async def query(db):
                await asyncio.sleep(1)
                return "database"

            return await self._with_fallback("Slow query", query, lambda: "static")

    repo = SlowRepository(FailingSession(), timeout=0.01)

    assert asyncio.run(repo.fetch()) == "static"
    assert repo.data_source == DATA_SOURCE_UNAVAILABLE


# SQLite

def test_seeded_database(tmp_path):
    async def scenario(db):
        users, data_source = await UserService(db).list_users()
        moods = await MoodStore(db).get_by_user(1)
        catalog = await RecommendationCatalog(db).get_all()
        return users, data_source, moods, catalog

    users, data_source, moods, catalog = run_with_db(tmp_path, scenario)

    assert len(users) == 3
    assert data_source == DATA_SOURCE_DATABASE
    assert len(moods) == 7
    assert [m.recorded_at for m in moods] == sorted(m.recorded_at for m in moods)
    assert [c.id for c in catalog] == list(range(1, 26))


def test_record_and_delete_mood(tmp_path):
    async def scenario(db):
        store = MoodStore(db)
        entry = await store.record(2, 0, "rough start")
        found = await store.get_by_id(entry.id)
        deleted = await store.delete(entry.id)
        deleted_again = await store.delete(entry.id)
        return entry, found, deleted, deleted_again

    entry, found, deleted, deleted_again = run_with_db(tmp_path, scenario)

    assert entry.score == 1
    assert found == entry
    assert deleted is True
    assert deleted_again is False


def test_user_crud(tmp_path):
    async def scenario(db):
        service = UserService(db)
        created = await service.create(UserCreateRequest(name="Sam Lee", password="pw", is_admin=True))
        updated = await service.update(created, UserUpdateRequest(department="Finance", is_admin=False))
        logged_in = await service.authenticate("sam.lee", "pw")
        count_before = await service.count()
        deleted = await service.delete(created.id)
        count_after = await service.count()
        return created, updated, logged_in, count_before, deleted, count_after

    created, updated, logged_in, count_before, deleted, count_after = run_with_db(tmp_path, scenario)

    assert created.id == 4
    assert updated.department == "Finance"
    assert updated.role == "Employee"
    assert logged_in.last_login_at is not None
    assert count_before == 4
    assert deleted is True
    assert count_after == 3


def test_seeding_is_idempotent(tmp_path):
    async def scenario(db):
        await seed_database(db)
        return await UserService(db).count()

    assert run_with_db(tmp_path, scenario) == 3


def test_seeded_moods_match_static_fallback(tmp_path):
    async def scenario(db):
        return await MoodStore(db).get_all()

    seeded = run_with_db(tmp_path, scenario)
    static = asyncio.run(MoodStore(None).get_all())

    assert [(m.id, m.user_id, m.score, m.notes) for m in seeded] == [
        (m.id, m.user_id, m.score, m.notes) for m in static
    ]
