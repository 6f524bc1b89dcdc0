"""Seed database with sample volunteers and events for local development."""

import asyncio
from datetime import date

from volunteer_match.db.unit_of_work import UnitOfWork

SAMPLE_VOLUNTEERS = [
    {
        "user_id": 1,
        "full_name": "Dana Reyes",
        "city": "Houston",
        "state_code": "TX",
        "availability": "2025-12-05, 2025-12-06",
        "skills": ["Cooking", "First Aid"],
    },
    {
        "user_id": 2,
        "full_name": "Sam Patel",
        "city": "Katy",
        "state_code": "TX",
        "availability": "2025-11-20",
        "skills": ["Driving", "Logistics"],
    },
]

SAMPLE_EVENTS = [
    {
        "name": "Community Kitchen",
        "description": "Prepare and serve hot meals.",
        "location": "1200 Main St, Houston, TX",
        "urgency": 3,
        "event_date": date(2025, 12, 5),
        "skills": ["Cooking"],
    },
    {
        "name": "Food Bank Delivery",
        "description": "Deliver boxes to homebound seniors.",
        "location": "45 Mason Rd, Katy, TX",
        "urgency": 2,
        "event_date": date(2025, 11, 20),
        "skills": ["Driving", "Logistics"],
    },
    {
        "name": "Health Fair",
        "description": "Staff the first-aid tent.",
        "location": "900 Commerce St, Dallas, TX",
        "urgency": 4,
        "event_date": date(2025, 12, 10),
        "skills": ["First Aid", "Communication"],
    },
]


async def seed_database():
    """Seed the database with sample volunteers and events."""
    async with UnitOfWork() as uow:
        print("Seeding database with sample data...")

        print(f"\nSeeding {len(SAMPLE_VOLUNTEERS)} sample volunteers...")
        for data in SAMPLE_VOLUNTEERS:
            fields = dict(data)
            skill_names = fields.pop("skills")
            if await uow.volunteers.get_by_user_id(fields["user_id"]):
                print(f"  - Skipping user {fields['user_id']} (already exists)")
                continue
            skills = await uow.skills.get_or_create_many(skill_names)
            profile = await uow.volunteers.create_with_skills(skills, **fields)
            print(f"  ✓ Created volunteer: {profile.full_name} ({profile.city})")

        print(f"\nSeeding {len(SAMPLE_EVENTS)} sample events...")
        for data in SAMPLE_EVENTS:
            fields = dict(data)
            skill_names = fields.pop("skills")
            skills = await uow.skills.get_or_create_many(skill_names)
            event = await uow.events.create_with_skills(skills, **fields)
            print(f"  ✓ Created event: {event.name} ({event.event_date})")

        await uow.commit()
        print("\n✓ Database seeding completed successfully!")


if __name__ == "__main__":
    asyncio.run(seed_database())
