from picstash.models.user import User


class TestRegisterUser:

    def test_given_missing_email_when_registering_then_returns_400(self, client):
        # When
        response = client.post("/api/users", json={"username": "alice"})

        # Then
        assert response.status_code == 400
        assert response.json() == {"message": "Username and Email is required."}

    def test_given_missing_username_when_registering_then_returns_400(self, client):
        response = client.post("/api/users", json={"email": "alice@example.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Username and Email is required."}

    def test_given_no_body_when_registering_then_returns_400(self, client):
        response = client.post("/api/users")

        assert response.status_code == 400
        assert response.json() == {"message": "Username and Email is required."}

    def test_given_invalid_email_when_registering_then_returns_400(self, client):
        response = client.post("/api/users", json={"username": "alice", "email": "aliceexample.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Please give valid email."}

    def test_given_existing_email_when_registering_then_returns_400_without_second_record(self, client, db, make_user):
        # Given
        make_user(email="alice@example.com")

        # When
        response = client.post("/api/users", json={"username": "other", "email": "alice@example.com"})

        # Then
        assert response.status_code == 400
        assert response.json() == {"message": "User already exists"}
        assert db.query(User).filter(User.email == "alice@example.com").count() == 1

    def test_given_existing_malformed_email_when_registering_then_conflict_is_reported_first(self, client, make_user):
        # Given: existence is checked before the email shape
        make_user(email="not-an-email")

        # When
        response = client.post("/api/users", json={"username": "bob", "email": "not-an-email"})

        # Then
        assert response.status_code == 400
        assert response.json() == {"message": "User already exists"}

    def test_given_numeric_username_when_registering_then_returns_400_message_body(self, client, db):
        response = client.post("/api/users", json={"username": 42, "email": "alice@example.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body."
        assert "body.username" in response.json()["error"]
        assert db.query(User).count() == 0

    def test_given_valid_body_when_registering_then_returns_201_with_user(self, client, db):
        # When
        response = client.post("/api/users", json={"username": "alice", "email": "alice@example.com"})

        # Then
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "user created successfully."
        assert body["newUser"]["username"] == "alice"
        assert body["newUser"]["email"] == "alice@example.com"
        assert isinstance(body["newUser"]["id"], int)
        assert db.query(User).count() == 1
