import io

from mongobase.demo import Product, User, main, run_demo


def _run():
    out = io.StringIO()
    user, product = run_demo(out)
    return user, product, out.getvalue()


def test_user_final_state():
    user, _, _ = _run()
    assert user.name == "John Smith"
    assert user.age == 31
    assert user.email == "john@example.com"
    assert user.is_deleted() is True
    assert user.updated_at is not None and user.updated_at >= user.created_at


def test_product_final_state():
    _, product, _ = _run()
    assert product.price == 42000.00
    assert product.description == "High-performance gaming laptop with RTX 4080 - On Sale!"
    assert product.category == "Electronics"
    assert product.is_deleted() is False
    assert product.deleted_at is None
    assert product.updated_at >= product.created_at


def test_output_mentions_ids_and_prices():
    user, product, text = _run()
    assert text.startswith("=== MongoDB BaseModel Example ===")
    assert text.rstrip().endswith("=== Example completed successfully! ===")
    assert f"User ID: {user.id}" in text
    assert f"Product ID: {product.id}" in text
    assert "Price: 45000.00 THB" in text
    assert "Updated Name: John Smith" in text


def test_ids_are_distinct_and_hex():
    user, product, _ = _run()
    assert len(user.id) == 24
    assert user.id != product.id
    int(user.id, 16)


def test_main_prints_walkthrough(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "1. Creating a new user:" in captured
    assert "6. All getter methods:" in captured


def test_user_round_trip_through_document():
    user = User(name="Jane Roe", email="jane@example.com", age=40)
    user.set_insert_meta()
    user.set_update_meta()
    assert User.from_document(user.to_document()) == user


def test_product_document_keys():
    product = Product(name="Desk", price=10.5, description="Oak", category="Furniture")
    product.set_insert_meta()
    document = product.to_document()
    assert set(document) == {"_id", "created_at", "name", "price", "description", "category"}
    assert document["_id"] == product.oid
    assert Product.from_document(document) == product