import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tokengate.models.resources import Advantage, Contact, Project
from tokengate.models.user import User
from tokengate.repositories.resource_repo import AdvantageRepository, ContactRepository, ProjectRepository
from tokengate.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

CONTACTS = [
    {"name": "Sales", "email": "sales@acme-corp.com", "phone": "+1-555-0100"},
    {"name": "Support", "email": "support@acme-corp.com", "phone": "+1-555-0101"},
    {"name": "Press", "email": "press@acme-corp.com", "phone": "+1-555-0102"},
]

ADVANTAGES = [
    {"title": "Fast onboarding", "description": "Accounts are ready to use right after registration."},
    {"title": "Short-lived access", "description": "Access tokens expire after fifteen minutes."},
    {"title": "Single-use refresh", "description": "Every refresh token can be exchanged exactly once."},
]

PROJECTS = [
    {"title": "Landing page", "description": "Public marketing site.", "url": "https://example.com"},
    {"title": "Mobile client", "description": "iOS and Android application.", "url": None},
    {"title": "Partner API", "description": "Integration endpoints for partners.", "url": "https://api.example.com"},
]

# Local development accounts, only created when DEBUG is on.
DEMO_USERS = [
    {"username": "admin", "password": "1234", "phone": "+1-555-0001"},
    {"username": "user", "password": "pass", "phone": "+1-555-0002"},
]


async def init_db(session: AsyncSession, with_demo_users: bool = False) -> None:
    seeds = [
        (ContactRepository(session), Contact, CONTACTS),
        (AdvantageRepository(session), Advantage, ADVANTAGES),
        (ProjectRepository(session), Project, PROJECTS),
    ]
    for repo, model, rows in seeds:
        if await repo.count():
            continue
        for row in rows:
            await repo.create(model(**row))
        logger.info("Seeded %d rows into %s", len(rows), model.__tablename__)

    if with_demo_users:
        user_repo = UserRepository(session)
        for row in DEMO_USERS:
            if not await user_repo.get_by_username(row["username"]):
                await user_repo.create(User(**row))
                logger.info("Created demo user: %s", row["username"])

    await session.commit()
