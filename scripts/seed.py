#!/usr/bin/env python3
"""
Seed the database with the demo programs, an administrator and a member.

Each member gets a sample plan, payment, activity log and a few metrics.
Records that already exist (same program id, email or transaction reference)
are skipped, so the script can be run repeatedly.

Usage:
    python scripts/seed.py
"""

import os
import sys
from datetime import timedelta
from decimal import Decimal
from typing import Dict, Optional

from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

load_dotenv()

# Add the project root to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.base_class import utcnow  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402
from app.models import (  # noqa: E402
    DailyPlan,
    MetricKey,
    Payment,
    PaymentMethod,
    Program,
    Role,
    User,
    UserActivityLog,
    UserMetric,
)
from app.schemas.workout import WorkoutDetails  # noqa: E402
from app.services.auth import AuthService  # noqa: E402
from app.utils.logger import get_logger  # noqa: E402

logger = get_logger("SEED")

PROGRAMS = [
    {
        "id": "basic-fitness-id",
        "name": "Basic Fitness",
        "description": "A beginner-friendly fitness program",
        "duration": 30,
        "price": Decimal("49.99"),
        "image_url": "https://example.com/basic-fitness.jpg",
        "active": True,
    },
    {
        "id": "advanced-training-id",
        "name": "Advanced Training",
        "description": "High-intensity workout for experienced members",
        "duration": 60,
        "price": Decimal("79.99"),
        "image_url": "https://example.com/advanced-training.jpg",
        "active": True,
    },
]

USERS = [
    {
        "name": "Admin",
        "email": "admin@y-gym.io",
        "address": "123 Fitness Ave, Gymtown",
        "phone": "+1 (555) 123-4567",
        "image_url": "https://randomuser.me/api/portraits/women/42.jpg",
        "role": Role.ADMIN,
        "password": "password",
        "activity": {"weight": 68.5, "calories": 2000, "heartRate": 76},
        "plan": {
            "title": "Morning Routine",
            "details": {
                "type": "WORKOUT",
                "caloriesBurned": 320,
                "exercises": [
                    {"name": "Jogging", "sets": 1, "reps": 1, "duration": 30},
                    {"name": "Plank", "sets": 3, "reps": 1, "duration": 1},
                ],
            },
        },
        "payment": {
            "amount": Decimal("50"),
            "method": PaymentMethod.CARD,
            "transaction_ref": "txn_alice_001",
            "program_id": "basic-fitness-id",
        },
        "metrics": [(MetricKey.WEIGHT, 68.5, "kg"), (MetricKey.HEIGHT, 170, "cm")],
    },
    {
        "name": "Ar Kar Moe",
        "email": "arkarmoe@y-gym.io",
        "address": "456 Muscle St, Gymtown",
        "phone": "+1 (555) 987-6543",
        "image_url": "https://randomuser.me/api/portraits/men/37.jpg",
        "role": Role.MEMBER,
        "password": "password",
        "activity": {"weight": 82, "calories": 2300, "sleepHours": 6},
        "plan": {
            "title": "Evening Burn",
            "details": {
                "type": "WORKOUT",
                "caloriesBurned": 450,
                "exercises": [
                    {"name": "Cycling", "sets": 1, "reps": 1, "duration": 30},
                    {"name": "Push-ups", "sets": 3, "reps": 15},
                ],
            },
        },
        "payment": {
            "amount": Decimal("45"),
            "method": PaymentMethod.PAYPAL,
            "transaction_ref": "txn_bob_001",
            "program_id": "advanced-training-id",
        },
        "metrics": [(MetricKey.WEIGHT, 82, "kg"), (MetricKey.WAIST, 86, "cm"), (MetricKey.BODY_FAT, 18.5, "%")],
    },
]


class GymSeeder:
    def __init__(self):
        self.db: Optional[Session] = None
        self.stats: Dict[str, int] = {
            'programs_created': 0,
            'programs_skipped': 0,
            'users_created': 0,
            'users_skipped': 0,
        }

    def __enter__(self):
        self.db = SessionLocal()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.db:
            if exc_type is not None:
                self.db.rollback()
                logger.error(f"Rolling back due to exception: {exc_val}", "CLEANUP")
            self.db.close()

    def seed_programs(self) -> None:
        for program_data in PROGRAMS:
            if self.db.get(Program, program_data["id"]):
                self.stats['programs_skipped'] += 1
                continue
            self.db.add(Program(**program_data))
            self.stats['programs_created'] += 1
        self.db.commit()
        logger.info("Programs seeded", "PROGRAMS", **{k: v for k, v in self.stats.items() if k.startswith("programs")})

    def seed_users(self) -> None:
        now = utcnow()
        for user_data in USERS:
            if self.db.query(User.id).filter(User.email == user_data["email"]).first():
                self.stats['users_skipped'] += 1
                continue

            user = User(
                name=user_data["name"],
                email=user_data["email"],
                address=user_data["address"],
                phone=user_data["phone"],
                image_url=user_data["image_url"],
                role=user_data["role"],
                hashed_password=AuthService.get_password_hash(user_data["password"]),
            )
            user.activity_logs.append(UserActivityLog(data=user_data["activity"]))

            details = WorkoutDetails.model_validate(user_data["plan"]["details"])
            user.plans.append(DailyPlan(title=user_data["plan"]["title"], date=now, details=details.to_json()))

            payment_data = user_data["payment"]
            if not self.db.query(Payment.id).filter(Payment.transaction_ref == payment_data["transaction_ref"]).first():
                user.payments.append(Payment(**payment_data))

            for days_ago, (key, value, unit) in enumerate(user_data["metrics"]):
                user.metrics.append(
                    UserMetric(key=key, value=value, unit=unit, recorded_at=now - timedelta(days=days_ago))
                )

            self.db.add(user)
            self.stats['users_created'] += 1
        self.db.commit()
        logger.info("Users seeded", "USERS", **{k: v for k, v in self.stats.items() if k.startswith("users")})


def main() -> int:
    logger.banner("Y-GYM SEED")
    try:
        with GymSeeder() as seeder:
            seeder.seed_programs()
            seeder.seed_users()
    except SQLAlchemyError as e:
        logger.error(f"Seeding failed: {e}", "SEED")
        return 1

    logger.success("Seeding completed", "SEED")
    return 0


if __name__ == "__main__":
    sys.exit(main())
