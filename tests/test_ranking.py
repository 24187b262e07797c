"""Tests for developer rank computation against the database."""

from datetime import datetime

import pytest

from devrank.data_models.ranking import RankScope
from devrank.database.models import Developer
from devrank.utils.exceptions import EntityNotInScopeError
from helpers import add_location, developer_attrs, seed_developers


def test_global_rank_uses_competition_semantics(run):
    async def scenario(service):
        developers = await seed_developers(service, [("ada", 100), ("bob", 90), ("cy", 90), ("dee", 80)])
        return [await service.rank_of_developer(d) for d in developers]

    assert run(scenario) == [1, 2, 2, 4]


def test_rank_is_independent_of_creation_order(run):
    async def scenario(service):
        developers = await seed_developers(service, [("dee", 80), ("cy", 90), ("ada", 100), ("bob", 90)])
        return {d.username: await service.rank_of_developer(d, RankScope.GLOBAL) for d in developers}

    assert run(scenario) == {"ada": 1, "bob": 2, "cy": 2, "dee": 4}


def test_same_location_rank_ignores_other_locations(run):
    async def scenario(service):
        ankara = await add_location(service.database, "Ankara")
        izmir = await add_location(service.database, "Izmir")
        developers = await seed_developers(service, [
            developer_attrs("ada", 500, location_id=izmir.id),
            developer_attrs("bob", 300, location_id=ankara.id),
            developer_attrs("cy", 200, location_id=ankara.id),
            developer_attrs("dee", 200, location_id=ankara.id),
            developer_attrs("eve", 100, location_id=ankara.id),
        ])
        by_name = {d.username: d for d in developers}
        local = {
            name: await service.rank_of_developer(by_name[name], RankScope.SAME_LOCATION)
            for name in ("bob", "cy", "dee", "eve")
        }
        global_rank = await service.rank_of_developer(by_name["bob"], RankScope.GLOBAL)
        return local, global_rank

    local, global_rank = run(scenario)
    assert local == {"bob": 1, "cy": 2, "dee": 2, "eve": 4}
    assert global_rank == 2


def test_same_location_rank_without_location_is_out_of_scope(run):
    async def scenario(service):
        ada, = await seed_developers(service, [("ada", 100)])
        with pytest.raises(EntityNotInScopeError) as excinfo:
            await service.rank_of_developer(ada, RankScope.SAME_LOCATION)
        return excinfo.value

    error = run(scenario)
    assert error.scope is RankScope.SAME_LOCATION


def test_rank_of_unknown_developer_is_out_of_scope(run):
    async def scenario(service):
        await seed_developers(service, [("ada", 100)])
        ghost = Developer(id=999, username="ghost", score=50.0, github_created_at=datetime(2020, 1, 1))
        with pytest.raises(EntityNotInScopeError) as excinfo:
            await service.rank_of_developer(ghost)
        return excinfo.value

    assert run(scenario).developer_id == 999


def test_rank_with_scope_mismatch_is_out_of_scope(run):
    async def scenario(service):
        ankara = await add_location(service.database, "Ankara")
        izmir = await add_location(service.database, "Izmir")
        ada, = await seed_developers(service, [developer_attrs("ada", 10, location_id=ankara.id)])
        # Stale copy pointing at a location the stored record is not in
        moved = Developer(id=ada.id, username="ada", score=10.0, location_id=izmir.id)
        with pytest.raises(EntityNotInScopeError):
            await service.rank_of_developer(moved, RankScope.SAME_LOCATION)

    run(scenario)


def test_single_developer_ranks_first(run):
    async def scenario(service):
        ada, = await seed_developers(service, [("ada", 0)])
        return await service.rank_of_developer(ada)

    assert run(scenario) == 1
