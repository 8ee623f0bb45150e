"""Store users in MongoDB with soft deletion."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence, TextIO

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .model import BaseCollection

log = logging.getLogger(__name__)

DEFAULT_URI = "mongodb://localhost:27017"
DATABASE_NAME = "basemodel_example"
COLLECTION_NAME = "users"

_NOT_DELETED = {"deleted_at": {"$exists": False}}
_DELETED = {"deleted_at": {"$exists": True}}


@dataclass(kw_only=True)
class User(BaseCollection):
    """A user account that can be deactivated or soft deleted."""

    name: str = ""
    email: str = ""
    age: int = 0
    is_active: bool = False


def _parse_id(user_id: str) -> ObjectId:
    if not isinstance(user_id, str) or len(user_id) != 24:
        raise ValueError(f"invalid ObjectId hex string: {user_id!r}")
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError) as exc:
        raise ValueError(f"invalid ObjectId hex string: {user_id!r}") from exc


class UserRepository:
    """Database operations on the users collection."""

    def __init__(self, database: Any) -> None:
        self.collection = database.get_collection(COLLECTION_NAME)

    def _find_users(self, query: dict[str, Any]) -> list[User]:
        return [User.from_document(doc) for doc in self.collection.find(query)]

    def create(self, user: User) -> None:
        """Stamp the user's insert metadata and store it."""
        user.set_insert_meta()
        self.collection.insert_one(user.to_document())

    def find_by_id(self, user_id: str) -> User:
        """Return the user with this id unless it is soft deleted.

        Raises ValueError for a malformed id and LookupError when no such
        user exists.
        """
        query = {"_id": _parse_id(user_id), **_NOT_DELETED}
        document = self.collection.find_one(query)
        if document is None:
            raise LookupError(f"no user with id {user_id}")
        return User.from_document(document)

    def find_all(self) -> list[User]:
        """Return every user that is not soft deleted."""
        return self._find_users(dict(_NOT_DELETED))

    def update(self, user_id: str, user: User) -> None:
        """Overwrite the stored user's fields unless it is soft deleted."""
        oid = _parse_id(user_id)
        user.set_update_meta()
        query = {"_id": oid, **_NOT_DELETED}
        changes = {
            "$set": {
                "name": user.name,
                "email": user.email,
                "age": user.age,
                "is_active": user.is_active,
                "updated_at": user.updated_at,
            }
        }
        self.collection.update_one(query, changes)

    def soft_delete(self, user_id: str) -> None:
        """Mark the user as deleted without removing it."""
        oid = _parse_id(user_id)
        now = datetime.now(timezone.utc)
        self.collection.update_one({"_id": oid}, {"$set": {"deleted_at": now}})

    def find_deleted(self) -> list[User]:
        """Return every soft-deleted user."""
        return self._find_users(dict(_DELETED))

    def find_active_older_than(self, age: int) -> list[User]:
        """Return active, not deleted users strictly older than ``age``."""
        return self._find_users(
            {"age": {"$gt": age}, "is_active": True, **_NOT_DELETED}
        )


def _run_examples(repo: UserRepository, out: TextIO) -> None:
    def say(text: str = "") -> None:
        print(text, file=out)

    repo.collection.drop()

    say("\n1. Creating users:")
    users = [
        User(name="Alice Johnson", email="alice@example.com", age=28, is_active=True),
        User(name="Bob Smith", email="bob@example.com", age=35, is_active=True),
        User(name="Charlie Brown", email="charlie@example.com", age=42, is_active=False),
    ]
    created_ids: list[str] = []
    for number, user in enumerate(users, start=1):
        try:
            repo.create(user)
        except PyMongoError as exc:
            log.error("Failed to create user %d: %s", number, exc)
            continue
        created_ids.append(user.id)
        say(f"   ✓ Created user: {user.name} (ID: {user.id})")

    say("\n2. Finding all active users:")
    for user in repo.find_all():
        say(f"   - {user.name} ({user.email}) - Age: {user.age}, Active: {str(user.is_active).lower()}")

    say("\n3. Finding user by ID:")
    if created_ids:
        try:
            found = repo.find_by_id(created_ids[0])
        except (LookupError, PyMongoError) as exc:
            log.error("Failed to find user: %s", exc)
        else:
            say(f"   Found: {found.name} (Created: {found.created_at})")

    say("\n4. Updating user:")
    if created_ids:
        changes = User(
            name="Alice Johnson Updated",
            email="alice.updated@example.com",
            age=29,
            is_active=True,
        )
        try:
            repo.update(created_ids[0], changes)
        except PyMongoError as exc:
            log.error("Failed to update user: %s", exc)
        else:
            say("   ✓ Updated user successfully")
            try:
                updated = repo.find_by_id(created_ids[0])
            except (LookupError, PyMongoError) as exc:
                log.error("Failed to find updated user: %s", exc)
            else:
                say(f"   Updated info: {updated.name} ({updated.email}) - Updated at: {updated.updated_at}")

    say("\n5. Soft deleting user:")
    if len(created_ids) > 1:
        try:
            repo.soft_delete(created_ids[1])
        except PyMongoError as exc:
            log.error("Failed to soft delete user: %s", exc)
        else:
            say("   ✓ Soft deleted user successfully")

    say("\n6. Active users after soft deletion:")
    active = repo.find_all()
    say(f"   Active users count: {len(active)}")
    for user in active:
        say(f"   - {user.name} ({user.email})")

    say("\n7. Soft deleted users:")
    deleted = repo.find_deleted()
    say(f"   Deleted users count: {len(deleted)}")
    for user in deleted:
        say(f"   - {user.name} (Deleted at: {user.deleted_at})")

    say("\n8. Advanced query - Active users over 30:")
    older = repo.find_active_older_than(30)
    say(f"   Found {len(older)} active users over 30:")
    for user in older:
        say(f"   - {user.name} ({user.age} years old)")

    say("\n=== MongoDB integration example completed! ===")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the repository walkthrough against a MongoDB server."""
    parser = argparse.ArgumentParser(
        description="Create, query, update and soft delete users in MongoDB."
    )
    parser.add_argument("--uri", default=DEFAULT_URI, help="MongoDB connection string")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=== MongoDB BaseModel Integration Example ===\n")
    try:
        client: MongoClient = MongoClient(args.uri, serverSelectionTimeoutMS=5000)
    except PyMongoError as exc:
        log.error("Failed to connect to MongoDB: %s", exc)
        log.info("Please make sure MongoDB is running on localhost:27017")
        log.info("You can also change the connection string with --uri")
        return 1

    with client:
        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            log.error("Failed to ping MongoDB: %s", exc)
            log.info("Please make sure MongoDB is running and accessible")
            return 1
        print("✓ Connected to MongoDB successfully!")
        try:
            _run_examples(UserRepository(client[DATABASE_NAME]), sys.stdout)
        except PyMongoError as exc:
            log.error("Database operation failed: %s", exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())