"""End-to-end tests for reading and editing one's own profile."""

from tests.conftest import new_thread_payload


class TestOwnProfile:
    """GET and PUT /users/profile."""

    def test_get_requires_auth(self, client):
        """Should return 401 without a token."""
        response = client.get("/users/profile")

        assert response.status_code == 401

    def test_get_own_profile(self, client, register_user):
        """Should return the caller's profile with thread and reply counts."""
        # Arrange
        me, cookies = register_user("olga")
        thread_id = client.post(
            "/threads", json=new_thread_payload(), cookies=cookies
        ).json()["thread_id"]
        parent = client.post(
            f"/threads/{thread_id}/replies",
            json={"content": "First thought"},
            cookies=cookies,
        ).json()["reply_id"]
        client.post(
            f"/threads/{thread_id}/replies",
            json={"content": "Second thought", "parent_id": parent},
            cookies=cookies,
        )

        # Act
        response = client.get("/users/profile", cookies=cookies)

        # Assert
        assert response.status_code == 200
        assert response.json()["user_id"] == str(me.id)
        assert response.json()["thread_count"] == 1
        assert response.json()["reply_count"] == 2

    def test_update_requires_auth(self, client):
        """Should return 401 without a token."""
        response = client.put("/users/profile", json={"bio": "Hello"})

        assert response.status_code == 401

    def test_update_profile(self, client, register_user):
        """Changes should be visible on the public profile."""
        # Arrange
        me, cookies = register_user("pavel")

        # Act
        response = client.put(
            "/users/profile",
            json={
                "username": "  pavel_n  ",
                "bio": "Physicist",
                "avatar_url": "https://example.com/p.png",
            },
            cookies=cookies,
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "Profile updated successfully"
        public = client.get(f"/users/{me.id}").json()
        assert public["username"] == "pavel_n"
        assert public["bio"] == "Physicist"
        assert public["avatar_url"] == "https://example.com/p.png"

    def test_duplicate_username(self, client, register_user):
        """Should return 400 when another member holds the username."""
        register_user("quinn")
        _, cookies = register_user("rosa")

        response = client.put(
            "/users/profile", json={"username": "quinn"}, cookies=cookies
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    def test_invalid_avatar_url(self, client, register_user):
        """Should return 422 for an avatar that is not a URL."""
        _, cookies = register_user("sven")

        response = client.put(
            "/users/profile", json={"avatar_url": "not a url"}, cookies=cookies
        )

        assert response.status_code == 422

    def test_username_too_short(self, client, register_user):
        """Should return 422 for a two-character username."""
        _, cookies = register_user("tara")

        response = client.put(
            "/users/profile", json={"username": "ab"}, cookies=cookies
        )

        assert response.status_code == 422

    def test_bio_too_long(self, client, register_user):
        """Should return 422 for a bio over 500 characters."""
        _, cookies = register_user("uma")

        response = client.put(
            "/users/profile", json={"bio": "x" * 501}, cookies=cookies
        )

        assert response.status_code == 422
