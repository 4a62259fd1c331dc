import asyncio

import pytest

from prisma_builder.apps.schema_builder.repositories.model_repository import ModelRepository
from prisma_builder.core.bases.base_repository import RepositoryError
from prisma_builder.core.schemas.fields import PrismaModel


def test_create_get_save_delete():
    async def scenario():
        repo = ModelRepository()
        sid = await repo.create(PrismaModel(name="A"))
        assert await repo.exists(sid)
        assert (await repo.get(sid)).name == "A"

        await repo.save(sid, PrismaModel(name="B"))
        assert (await repo.get(sid)).name == "B"

        assert await repo.delete(sid) is True
        assert await repo.get(sid) is None
        assert await repo.delete(sid) is False

    asyncio.run(scenario())


def test_save_unknown_session_raises():
    async def scenario():
        with pytest.raises(RepositoryError):
            await ModelRepository().save("missing", PrismaModel())

    asyncio.run(scenario())


def test_locked_yields_none_for_unknown_session():
    async def scenario():
        async with ModelRepository().locked("missing") as item:
            assert item is None

    asyncio.run(scenario())


def test_concurrent_updates_on_one_session_are_serialised():
    async def scenario():
        repo = ModelRepository()
        sid = await repo.create(PrismaModel(name=""))

        async def append(suffix):
            async with repo.locked(sid) as model:
                await asyncio.sleep(0)
                await repo.save(sid, model.model_copy(update={"name": model.name + suffix}))

        await asyncio.gather(*(append("x") for _ in range(10)))
        assert (await repo.get(sid)).name == "x" * 10

    asyncio.run(scenario())


def test_oldest_session_is_evicted_at_the_limit():
    async def scenario():
        repo = ModelRepository(max_items=2)
        first = await repo.create(PrismaModel(name="A"))
        second = await repo.create(PrismaModel(name="B"))
        third = await repo.create(PrismaModel(name="C"))

        assert not await repo.exists(first)
        assert await repo.exists(second)
        assert await repo.exists(third)
        async with repo.locked(first) as item:
            assert item is None

    asyncio.run(scenario())


def test_no_limit_keeps_every_session():
    async def scenario():
        repo = ModelRepository(max_items=0)
        ids = [await repo.create(PrismaModel()) for _ in range(5)]
        assert all([await repo.exists(i) for i in ids])

    asyncio.run(scenario())
