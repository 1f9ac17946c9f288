# flake8: noqa


def test_list_books(client):
    res = client.get("/api/books")
    assert res.status_code == 200
    data = res.json()
    assert isinstance(data, list)
    assert len(data) > 0


def test_get_single_book(client):
    res = client.get("/api/books/1")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == 1
    assert "title" in body
    assert "author" in body


def test_get_book_invalid_id(client):
    res = client.get("/api/books/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "ID must be a number"


def test_get_book_not_found(client):
    res = client.get("/api/books/999")
    assert res.status_code == 404
    assert res.json()["message"] == "Book not found"


def test_create_book(client):
    res = client.post("/api/books", json={"id": 7, "title": "T", "author": "A"})
    assert res.status_code == 201
    assert res.json() == {"id": 7}


def test_create_book_missing_title(client):
    res = client.post("/api/books", json={"id": 6, "author": "A"})
    assert res.status_code == 400
    body = res.json()
    assert body["type"] == "error"
    assert body["status"] == 400
    assert body["message"] == "Bad Request"


def test_create_book_empty_body(client):
    res = client.post("/api/books")
    assert res.status_code == 400
    assert res.json()["message"] == "Bad Request"


def test_create_book_malformed_json(client):
    res = client.post(
        "/api/books", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Bad Request"


def test_update_book(client):
    res = client.put("/api/books/1", json={"title": "Updated Book Title", "author": "New Author"})
    assert res.status_code == 204

    body = client.get("/api/books/1").json()
    assert body == {"id": 1, "title": "Updated Book Title", "author": "New Author"}


def test_update_book_non_numeric_id(client):
    res = client.put("/api/books/foo", json={"title": "Valid Title", "author": "Valid Author"})
    assert res.status_code == 400
    assert res.json()["message"] == "ID must be a number"


def test_update_book_missing_title(client):
    res = client.put("/api/books/1", json={"author": "Valid Author"})
    assert res.status_code == 400
    assert res.json()["message"] == "Bad Request"


def test_update_book_not_found(client):
    res = client.put("/api/books/77", json={"title": "Nowhere", "author": "Nobody"})
    assert res.status_code == 404
    assert res.json()["message"] == "Book not found"


def test_delete_book(client):
    res = client.delete("/api/books/5")
    assert res.status_code == 204
    assert client.get("/api/books/5").status_code == 404

    # a second delete finds nothing
    res = client.delete("/api/books/5")
    assert res.status_code == 404


def test_delete_book_non_numeric_id(client):
    res = client.delete("/api/books/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "ID must be a number"


def test_book_id_too_long_for_int(client):
    res = client.get("/api/books/" + "1" * 5000)
    assert res.status_code == 400
    assert res.json()["message"] == "ID must be a number"


def test_book_id_non_ascii_digits(client):
    # ARABIC-INDIC DIGIT ONE
    res = client.get("/api/books/١")
    assert res.status_code == 400
    assert res.json()["message"] == "ID must be a number"
