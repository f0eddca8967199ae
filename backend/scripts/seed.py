# scripts/seed.py
import asyncio
import random

from homelet.core.logging import configure_logging
from homelet.db.base import Base
from homelet.db.session import AsyncSessionLocal, engine
from homelet.db.crud_users import create_user, get_user_by_email
from homelet.db.crud_properties import create_property

logger = configure_logging()


async def get_or_create(db, email, **kwargs):
    user = await get_user_by_email(db, email)
    if not user:
        user = await create_user(db, email=email, password='password', **kwargs)
    return user


async def seed():
    # create tables (if migrations not run)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        await get_or_create(db, 'admin@example.com', name='Admin', role='admin')
        await get_or_create(db, 'tenant@example.com', name='Tenant')

        landlords = []
        for i in range(3):
            landlords.append(
                await get_or_create(db, f'landlord{i}@example.com', name=f'Landlord {i}', role='landlord')
            )

        cities = [('Austin', 'TX'), ('Denver', 'CO'), ('Portland', 'OR'), ('Boston', 'MA')]
        types = ['apartment', 'house', 'condo', 'studio']
        for i in range(20):
            city, state = random.choice(cities)
            await create_property(
                db,
                owner_id=random.choice(landlords).id,
                title=f'Home {i}',
                description='Bright and quiet, close to transit.',
                type=random.choice(types),
                price=900 + i * 50,
                address=f'{100 + i} Main St',
                city=city,
                state=state,
                zip_code=f'{10000 + i}',
                bedrooms=random.randint(0, 4),
                bathrooms=random.randint(1, 3),
                area=random.randint(30, 200),
                images=[],
            )
    logger.info('Seed complete')


if __name__ == '__main__':
    asyncio.run(seed())
