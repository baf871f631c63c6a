from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import level.domain.entities  # noqa: F401
from level.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from level.app.use_cases.auth import SignupCommand, SignupUseCase
from level.app.use_cases.spaces import CreateSpaceCommand, CreateSpaceUseCase
from level.config import ApplicationConfig
from level.depends import get_unit_of_work


class TestConfig(ApplicationConfig):
    BASE_URL = "http://level.test:4001"
    ENABLE_LOGGING_MIDDLEWARE = False


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from level.api.app import create_app

    app = create_app(TestConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_user_and_space(db_session):
    """
    Sign a team up and create a space owned by its first user.

    Returns a dict with the signup response (``user``, ``team``,
    ``access_token``), the ``space`` and its ``open_invitation``.
    """

    async def create(team_slug: str = "level", space_slug: str = "bridge") -> dict:
        signup = await SignupUseCase(SqlAlchemyUnitOfWork(db_session)).execute(
            SignupCommand(
                team_name="Level",
                team_slug=team_slug,
                email="derrick@level.app",
                username="derrick",
                password="$ecret$",
            )
        )
        assert signup.is_ok(), signup
        created = await CreateSpaceUseCase(SqlAlchemyUnitOfWork(db_session)).execute(
            UUID(signup.value.user.id),
            CreateSpaceCommand(name="Bridge", slug=space_slug),
        )
        assert created.is_ok(), created

        space = created.value.space
        return {
            "user": signup.value.user,
            "team": signup.value.team,
            "access_token": signup.value.access_token,
            "space": space,
            "open_invitation": space.open_invitation,
        }

    return create


@pytest.fixture
def post_graphql(client):
    """POST a GraphQL document as the holder of `access_token`"""

    async def post(query: str, variables: dict, access_token: str):
        return await client.post(
            "/graphql",
            json={"query": query, "variables": variables},
            headers={"Authorization": f"Bearer {access_token}"},
        )

    return post
