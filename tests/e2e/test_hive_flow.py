"""End-to-end tests for hives and content."""


def _create_hive(api, headers, name="science"):
    return api.client.post(
        "/hives", json={"name": name, "description": "A hive"}, headers=headers
    )


class TestHiveFlow:
    """Hive creation, moderation flags and content rollups over HTTP."""

    def test_health(self, api):
        response = api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_hive_requires_authentication(self, api):
        """Mutations without a token are rejected with 401."""
        response = _create_hive(api, headers={})

        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_create_and_fetch_hive(self, api):
        """A created hive is listed and readable."""
        # Arrange
        _, headers = api.register()

        # Act
        created = _create_hive(api, headers)
        hive_id = created.json()["hive_id"]
        fetched = api.client.get(f"/hives/{hive_id}")
        listed = api.client.get("/hives")

        # Assert
        assert created.status_code == 201
        assert created.json()["creator"] == "alice"
        assert fetched.status_code == 200
        assert fetched.json()["total_content"] == 0
        assert listed.json()["total"] == 1

    def test_duplicate_or_invalid_name_is_bad_request(self, api):
        """Name clashes and non-alphabetic names are 400."""
        # Arrange
        _, headers = api.register()
        _create_hive(api, headers)

        # Act
        duplicate = _create_hive(api, headers)
        invalid = _create_hive(api, headers, name="not valid!")

        # Assert
        assert duplicate.status_code == 400
        assert "already taken" in duplicate.json()["detail"]
        assert invalid.status_code == 400

    def test_missing_description_is_unprocessable(self, api):
        """Malformed bodies fail request validation."""
        _, headers = api.register()

        response = api.client.post("/hives", json={"name": "science"}, headers=headers)

        assert response.status_code == 422

    def test_unknown_hive_is_not_found(self, api):
        response = api.client.get("/hives/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404

    def test_archive_twice_conflicts(self, api):
        """Setting a flag that is already set is a 400."""
        # Arrange
        _, headers = api.register()
        hive_id = _create_hive(api, headers).json()["hive_id"]

        # Act
        first = api.client.post(f"/hives/{hive_id}/archive", headers=headers)
        second = api.client.post(f"/hives/{hive_id}/archive", headers=headers)

        # Assert
        assert first.status_code == 200
        assert first.json()["archived"] is True
        assert second.status_code == 400

    def test_content_lifecycle_moves_hive_total(self, api):
        """Posting, deleting and undeleting content adjust total_content."""
        # Arrange
        _, headers = api.register()
        hive_id = _create_hive(api, headers).json()["hive_id"]

        # Act
        posted = api.client.post(
            f"/hives/{hive_id}/content", json={"title": "Hello"}, headers=headers
        )
        content_id = posted.json()["content"]["content_id"]
        deleted = api.client.post(f"/content/{content_id}/delete", headers=headers)
        restored = api.client.post(f"/content/{content_id}/undelete", headers=headers)

        # Assert
        assert posted.status_code == 201
        assert posted.json()["hive"]["total_content"] == 1
        assert deleted.json()["hive"]["total_content"] == 0
        assert restored.json()["hive"]["total_content"] == 1
        assert api.client.get(f"/hives/{hive_id}/content").json()["total"] == 1

    def test_content_edit_by_other_account_is_forbidden(self, api):
        """Only the author may edit content."""
        # Arrange
        _, author_headers = api.register("alice")
        _, other_headers = api.register("bob")
        hive_id = _create_hive(api, author_headers).json()["hive_id"]
        content_id = api.client.post(
            f"/hives/{hive_id}/content", json={"title": "Mine"}, headers=author_headers
        ).json()["content"]["content_id"]

        # Act
        response = api.client.patch(
            f"/content/{content_id}", json={"title": "Theirs"}, headers=other_headers
        )

        # Assert
        assert response.status_code == 403
