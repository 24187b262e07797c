"""Builders for seeding test databases."""

from datetime import datetime

from devrank.database.models import Location, Repository


def developer_attrs(username, score=0.0, **overrides):
    attrs = {
        "username": username,
        "name": username.title(),
        "score": score,
        "total_starred": 0,
        "followers": 0,
        "github_created_at": datetime(2015, 6, 1, 12, 0, 0),
    }
    attrs.update(overrides)
    return attrs


async def seed_developers(service, rows):
    """Create developers from (username, score) pairs or attribute dicts, in order."""
    developers = []
    for row in rows:
        attrs = row if isinstance(row, dict) else developer_attrs(*row)
        developers.append(await service.create_developer(attrs))
    return developers


async def add_location(database, name):
    async with database.transaction() as session:
        location = Location(name=name, slug=name.lower().replace(" ", "-"))
        session.add(location)
        await session.flush()
        return location


async def add_repository(database, developer, name, **overrides):
    attrs = {
        "name": name,
        "score": 0.0,
        "total_stars": 0,
        "total_forks": 0,
        "developer_id": developer.id,
        "github_created_at": datetime(2018, 1, 1),
    }
    attrs.update(overrides)
    async with database.transaction() as session:
        repository = Repository(**attrs)
        session.add(repository)
        await session.flush()
        return repository
