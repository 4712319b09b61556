def _register(client, username="bob", password="pass1"):
    return client.post("/register", json={"username": username, "password": password})


def _post_message(client, posted_by, text="hi", epoch=1000):
    return client.post(
        "/messages",
        json={"posted_by": posted_by, "message_text": text, "time_posted_epoch": epoch},
    )


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_full_scenario(client):
    registered = _register(client)
    assert registered.status_code == 200
    account = registered.json()
    assert account["account_id"] > 0
    assert account["username"] == "bob"

    bad_login = client.post("/login", json={"username": "bob", "password": "wrong"})
    assert bad_login.status_code == 401
    assert bad_login.content == b""

    login = client.post("/login", json={"username": "bob", "password": "pass1"})
    assert login.status_code == 200
    assert login.json() == account

    posted = _post_message(client, account["account_id"])
    assert posted.status_code == 200
    message = posted.json()
    assert message["message_id"] > 0
    assert message["posted_by"] == account["account_id"]
    assert message["time_posted_epoch"] == 1000

    patched = client.patch(f"/messages/{message['message_id']}", json={"message_text": ""})
    assert patched.status_code == 400

    deleted = client.delete(f"/messages/{message['message_id']}")
    assert deleted.status_code == 200
    assert deleted.json() == message

    again = client.delete(f"/messages/{message['message_id']}")
    assert again.status_code == 200
    assert again.content == b""


def test_register_failures(client):
    assert _register(client, username="").status_code == 400
    assert _register(client, password="abc").status_code == 400
    assert _register(client).status_code == 200
    duplicate = _register(client)
    assert duplicate.status_code == 400
    assert duplicate.content == b""


def test_malformed_bodies_are_bad_requests(client):
    response = client.post("/register", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert client.post("/messages", json={"message_text": "hi"}).status_code == 400
    assert client.patch("/messages/1", json={}).status_code == 400


def test_non_numeric_id_is_bad_request(client):
    assert client.get("/messages/abc").status_code == 400
    assert client.get("/accounts/abc/messages").status_code == 400


def test_message_creation_failures(client):
    account = _register(client).json()
    assert _post_message(client, account["account_id"], text="").status_code == 400
    assert _post_message(client, account["account_id"], text="x" * 256).status_code == 400
    assert _post_message(client, account["account_id"] + 1).status_code == 400


def test_get_message(client):
    account = _register(client).json()
    message = _post_message(client, account["account_id"]).json()

    found = client.get(f"/messages/{message['message_id']}")
    assert found.status_code == 200
    assert found.json() == message

    missing = client.get("/messages/9999")
    assert missing.status_code == 200
    assert missing.content == b""


def test_patch_message(client):
    account = _register(client).json()
    message = _post_message(client, account["account_id"], epoch=77).json()

    response = client.patch(f"/messages/{message['message_id']}", json={"message_text": "edited"})

    assert response.status_code == 200
    assert response.json() == {**message, "message_text": "edited"}
    assert client.patch("/messages/9999", json={"message_text": "edited"}).status_code == 400


def test_listings(client):
    assert client.get("/messages").json() == []
    assert client.get("/accounts").json() == []

    bob = _register(client).json()
    amy = _register(client, username="amy", password="pass2").json()
    first = _post_message(client, bob["account_id"], text="one").json()
    second = _post_message(client, amy["account_id"], text="two").json()

    assert client.get("/accounts").json() == [bob, amy]
    assert client.get("/messages").json() == [first, second]
    assert client.get(f"/accounts/{bob['account_id']}/messages").json() == [first]
    assert client.get("/accounts/9999/messages").json() == []


def test_ids_beyond_sqlite_range_are_bad_requests(client):
    huge = 2 ** 70
    assert client.get(f"/messages/{huge}").status_code == 400
    assert client.delete(f"/messages/{huge}").status_code == 400
    assert client.patch(f"/messages/{huge}", json={"message_text": "x"}).status_code == 400
    assert client.get(f"/accounts/{huge}/messages").status_code == 400


def test_message_fields_beyond_sqlite_range_are_bad_requests(client):
    account = _register(client).json()
    assert _post_message(client, 2 ** 70).status_code == 400
    assert _post_message(client, account["account_id"], epoch=2 ** 70).status_code == 400
    assert _post_message(client, account["account_id"], epoch=-(2 ** 64)).status_code == 400
    assert client.get("/messages").json() == []


def test_largest_sqlite_id_is_just_not_found(client):
    response = client.get(f"/messages/{2 ** 63 - 1}")
    assert response.status_code == 200
    assert response.content == b""
