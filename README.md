# mongobase

A small base model for MongoDB documents. It carries the bookkeeping every
collection needs (an `ObjectId`, a creation time, and optional update and
soft-delete times), so your own document classes only describe their data.

## Installation

```
pip install mongobase
```

With the test requirements:

```
pip install "mongobase[test]"
```

## The base model

`mongobase.model.BaseCollection` is a keyword-only dataclass with four fields:

| field        | stored as    | default                      |
|--------------|--------------|------------------------------|
| `oid`        | `_id`        | the all-zero `ObjectId`      |
| `created_at` | `created_at` | `None`                       |
| `updated_at` | `updated_at` | `None`                       |
| `deleted_at` | `deleted_at` | `None`                       |

Timestamps are timezone-aware UTC `datetime` values.

- `set_insert_meta()` assigns a fresh `ObjectId` and sets `created_at` to now.
- `set_update_meta()` sets `updated_at` to now; the id and `created_at` are left alone.
- `set_delete_meta()` sets `deleted_at` to now, marking a soft delete.
- `is_deleted()` is true once `deleted_at` is set.
- `id` is a property giving the `ObjectId` as a 24-character hex string;
  before insert it is `"000000000000000000000000"`.
- `to_document()` returns a dict ready for `insert_one`. Fields are stored
  under their attribute names, except `oid`, which is stored as `_id`.
  `_id` is left out while the id is all zeros, and `updated_at` and
  `deleted_at` are left out while they are `None`.
- `from_document(document)` is a class method that builds an instance from a
  stored mapping, ignoring keys that are not fields of the class.

The module also exposes `ZERO_OBJECT_ID`, the all-zero `ObjectId`.

### Defining your own documents

Subclass `BaseCollection` as a keyword-only dataclass and add your fields:

```python
from dataclasses import dataclass

from mongobase.model import BaseCollection


@dataclass(kw_only=True)
class Article(BaseCollection):
    title: str = ""
    body: str = ""


article = Article(title="Hello")
article.set_insert_meta()
print(article.id, article.created_at, article.is_deleted())

article.set_update_meta()
article.set_delete_meta()
assert article.is_deleted()

stored = article.to_document()          # {"_id": ..., "created_at": ..., "title": "Hello", ...}
again = Article.from_document(stored)
assert again == article
```

## Working with a database

`mongobase.repository` uses the model against a MongoDB server. Its `User`
document adds `name`, `email`, `age` and `is_active` to the base fields.
`UserRepository` takes a `pymongo` database and works on its `users`
collection:

```python
from pymongo import MongoClient
from mongobase.repository import User, UserRepository

client = MongoClient("mongodb://localhost:27017")
repo = UserRepository(client["basemodel_example"])

alice = User(name="Alice Johnson", email="alice@example.com", age=28, is_active=True)
repo.create(alice)                      # sets insert metadata, then inserts

repo.find_by_id(alice.id)               # the user, unless soft deleted
repo.find_all()                         # every user not soft deleted
repo.update(alice.id, alice)            # sets updated_at and saves name, email, age, is_active
repo.soft_delete(alice.id)              # stamps deleted_at
repo.find_deleted()                     # only soft-deleted users
repo.find_active_older_than(30)         # active, not deleted, age over 30
```

An id that is not a 24-character `ObjectId` hex string raises `ValueError`
before the database is queried. `find_by_id` raises `LookupError` when no
matching user that is not soft deleted exists. `update` on a soft-deleted or
missing user changes nothing and raises no error.

## Commands

`mongobase-demo` needs no database. It creates, updates and soft-deletes a
user and a product in memory and prints each step:

```
mongobase-demo
```

The same walkthrough is available from code as `mongobase.demo.run_demo(out)`,
which writes to the given text stream (standard output by default) and
returns the final user and product.

`mongobase-mongodb-demo` runs against a MongoDB server. It drops and refills
the `users` collection of the `basemodel_example` database, then creates
users, queries them, updates one, soft-deletes another and lists the active,
deleted and older active users:

```
mongobase-mongodb-demo
mongobase-mongodb-demo --uri mongodb://localhost:27017
```

`--uri` defaults to `mongodb://localhost:27017`. If the server cannot be
reached the command logs the failure and exits with status 1.

## What it does not do

The repository is written for its own `User` document only; there is no
generic repository for other document classes, and no schema validation,
indexes or migrations. Soft-deleted documents are never removed.