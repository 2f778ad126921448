import anyio
import pytest

from movie_booking.platform.state.keyed_lock import KeyedLock


pytestmark = pytest.mark.unit


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_same_key_is_mutually_exclusive(self):
        # Given: two tasks entering the same key
        lock = KeyedLock(name='test')
        inside = 0
        max_inside = 0

        async def worker() -> None:
            nonlocal inside, max_inside
            async with lock.hold('M1'):
                inside += 1
                max_inside = max(max_inside, inside)
                await anyio.sleep(0.01)
                inside -= 1

        # When
        async with anyio.create_task_group() as tg:
            for _ in range(5):
                tg.start_soon(worker)

        # Then: never more than one holder
        assert max_inside == 1

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block_each_other(self):
        lock = KeyedLock(name='test')

        async with lock.hold('M1'):
            assert lock.locked('M1')
            with anyio.fail_after(1):
                async with lock.hold('M2'):
                    assert lock.locked('M2')

        assert not lock.locked('M1')
        assert not lock.locked('M2')

    def test_unknown_key_is_not_locked(self):
        assert KeyedLock().locked('never-used') is False


class TestKeyedLockCleanup:
    @pytest.mark.asyncio
    async def test_lock_is_dropped_after_single_holder_exits(self):
        # Given
        lock = KeyedLock(name='test')

        # When
        async with lock.hold('M1'):
            assert len(lock) == 1

        # Then
        assert len(lock) == 0
        assert lock._locks == {}

    @pytest.mark.asyncio
    async def test_lock_survives_while_waiters_remain_then_is_dropped(self):
        # Given: several tasks queued on the same key
        lock = KeyedLock(name='test')
        sizes: list[int] = []

        async def worker() -> None:
            async with lock.hold('M1'):
                sizes.append(len(lock))
                await anyio.sleep(0.01)

        # When
        async with anyio.create_task_group() as tg:
            for _ in range(5):
                tg.start_soon(worker)

        # Then: one shared lock while contended, none afterwards
        assert sizes == [1] * 5
        assert lock._locks == {}
        assert lock._users == {}

    @pytest.mark.asyncio
    async def test_many_distinct_keys_leave_nothing_behind(self):
        lock = KeyedLock(name='test')

        for i in range(1000):
            async with lock.hold(f'movie-{i}'):
                pass

        assert len(lock) == 0

    @pytest.mark.asyncio
    async def test_lock_is_dropped_when_body_raises(self):
        lock = KeyedLock(name='test')

        with pytest.raises(RuntimeError):
            async with lock.hold('M1'):
                raise RuntimeError('boom')

        assert len(lock) == 0
