"""Walk through the lifecycle of documents built on BaseCollection."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from .model import BaseCollection


@dataclass(kw_only=True)
class User(BaseCollection):
    """A person with a name, an e-mail address and an age."""

    name: str = ""
    email: str = ""
    age: int = 0


@dataclass(kw_only=True)
class Product(BaseCollection):
    """An item for sale."""

    name: str = ""
    price: float = 0.0
    description: str = ""
    category: str = ""


def run_demo(out: TextIO | None = None) -> tuple[User, Product]:
    """Create, update and soft delete sample documents, reporting each step.

    Returns the user and the product in their final state.
    """
    out = sys.stdout if out is None else out

    def say(text: str = "") -> None:
        print(text, file=out)

    say("=== MongoDB BaseModel Example ===\n")

    say("1. Creating a new user:")
    user = User(name="John Doe", email="john@example.com", age=30)
    user.set_insert_meta()
    say(f"   User ID: {user.id}")
    say(f"   Name: {user.name}")
    say(f"   Email: {user.email}")
    say(f"   Created At: {user.created_at}")
    say(f"   Is Deleted: {str(user.is_deleted()).lower()}\n")

    say("2. Updating the user:")
    user.name = "John Smith"
    user.age = 31
    user.set_update_meta()
    say(f"   Updated Name: {user.name}")
    say(f"   Updated Age: {user.age}")
    say(f"   Updated At: {user.updated_at}\n")

    say("3. Soft deleting the user:")
    user.set_delete_meta()
    say(f"   Is Deleted: {str(user.is_deleted()).lower()}")
    say(f"   Deleted At: {user.deleted_at}\n")

    say("4. Creating a new product:")
    product = Product(
        name="Gaming Laptop",
        price=45000.00,
        description="High-performance gaming laptop with RTX 4080",
        category="Electronics",
    )
    product.set_insert_meta()
    say(f"   Product ID: {product.id}")
    say(f"   Name: {product.name}")
    say(f"   Price: {product.price:.2f} THB")
    say(f"   Created At: {product.created_at}")

    say("\n5. Updating product multiple times:")
    product.price = 42000.00
    product.set_update_meta()
    say(f"   First update - New price: {product.price:.2f} THB at {product.updated_at}")

    product.description = "High-performance gaming laptop with RTX 4080 - On Sale!"
    product.set_update_meta()
    say(f"   Second update - Updated description at {product.updated_at}")

    say("\n6. All getter methods:")
    say(f"   ID: {product.id}")
    say(f"   Created: {product.created_at}")
    say(f"   Updated: {product.updated_at}")
    say(f"   Deleted: {product.deleted_at}")
    say(f"   Is Deleted: {str(product.is_deleted()).lower()}")

    say("\n=== Example completed successfully! ===")
    return user, product


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lifecycle walkthrough and print it to standard output."""
    parser = argparse.ArgumentParser(
        description="Show the metadata lifecycle of sample documents."
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())