from utils.mock_utils import create_test_article


class TestAdminRoutes:
    async def test_non_admin_forbidden(self, client, auth_headers):
        response = await client.get("/admin/dashboard", headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["error"]["error_code"] == "AUTH_ADMIN_REQUIRED"

    async def test_dashboard(self, client, test_db, test_user, admin_auth_headers):
        await create_test_article(test_db, test_user)

        data = (await client.get("/admin/dashboard", headers=admin_auth_headers)).json()

        assert data["total_users"] == 2
        assert data["published_articles"] == 1

    async def test_users(self, client, test_db, test_user, admin_auth_headers):
        await create_test_article(test_db, test_user)

        listing = (await client.get("/admin/users", params={"search": "test"}, headers=admin_auth_headers)).json()
        counts = {u["username"]: u["article_count"] for u in listing["items"]}
        assert counts == {"testuser": 1, "testadmin": 0}

        detail = (await client.get(f"/admin/users/{test_user.id}", headers=admin_auth_headers)).json()
        assert detail["user"]["username"] == "testuser"
        assert len(detail["recent_articles"]) == 1

    async def test_suspend_user_blocks_access(self, client, test_user, auth_headers, admin_auth_headers):
        response = await client.patch(
            f"/admin/users/{test_user.id}", json={"status": "suspended"}, headers=admin_auth_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "suspended"

        blocked = await client.get("/dashboard/articles", headers=auth_headers)
        assert blocked.status_code == 401

    async def test_admin_cannot_be_suspended(self, client, test_admin, admin_auth_headers):
        response = await client.patch(
            f"/admin/users/{test_admin.id}", json={"status": "suspended"}, headers=admin_auth_headers
        )

        assert response.status_code == 400

    async def test_articles(self, client, test_db, test_user, admin_auth_headers):
        article = await create_test_article(test_db, test_user, title="Any")

        listing = (await client.get("/admin/articles", headers=admin_auth_headers)).json()
        assert listing["items"][0]["user"]["username"] == "testuser"

        assert (await client.delete(f"/admin/articles/{article.id}", headers=admin_auth_headers)).status_code == 204
        assert (await client.delete(f"/admin/articles/{article.id}", headers=admin_auth_headers)).status_code == 404

    async def test_contacts(self, client, admin_auth_headers, enqueued_jobs):
        created = await client.post(
            "/contacts",
            json={"name": "Reader", "email": "reader@example.com", "subject": "Hi", "message": "Hello"},
        )
        assert created.status_code == 201
        contact_id = created.json()["id"]
        assert enqueued_jobs == [("contact_notification", contact_id)]

        listing = (await client.get("/admin/contacts", headers=admin_auth_headers)).json()
        assert [c["id"] for c in listing["items"]] == [contact_id]

        resolved = await client.patch(
            f"/admin/contacts/{contact_id}", json={"resolved": True}, headers=admin_auth_headers
        )
        assert resolved.json()["resolved"] is True
        assert (await client.get("/admin/contacts/999", headers=admin_auth_headers)).status_code == 404

    async def test_contact_requires_valid_email(self, client):
        response = await client.post(
            "/contacts", json={"name": "R", "email": "not-an-email", "subject": "Hi", "message": "Hello"}
        )

        assert response.status_code == 422
