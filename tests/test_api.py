from fastapi.testclient import TestClient

from main import app
from portfolio_app.config import settings
from portfolio_app.dependencies import get_link_service, get_notifier
from portfolio_app.exceptions import StorageError
from portfolio_app.models import ContactMessage
from portfolio_app.notifications.strategies import NotifierStrategy


class ExplodingNotifier(NotifierStrategy):
    async def notify_new_message(self, notification) -> bool:
        raise ConnectionError("SMTP server unreachable")


class BrokenLinkService:
    async def create_link(self, **kwargs):
        raise StorageError("Database error while creating link")


def generate(client, **body):
    payload = {"projectName": "Sales Dashboard", "projectType": "Visualization"}
    payload.update(body)
    return client.post("/api/generate-link", json=payload)


class TestHealth:
    def test_health(self, client: TestClient):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"

    def test_root(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert "version" in response.json()


class TestGenerateLink:
    """Test POST /api/generate-link"""

    def test_generate_link(self, client: TestClient):
        response = generate(client, originalUrl="https://github.com/example/sales-dashboard")
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["linkId"]
        assert data["generatedUrl"].endswith(f"/api/redirect/{data['linkId']}")
        assert data["expiresAt"] is None
        assert data["message"] == "Link generated successfully"

    def test_generate_link_with_expiry(self, client: TestClient):
        response = generate(client, expiresInDays=7)
        assert response.status_code == 200
        assert response.json()["expiresAt"] is not None

    def test_missing_project_type(self, client: TestClient):
        response = client.post("/api/generate-link", json={"projectName": "Sales Dashboard"})
        assert response.status_code == 400
        assert "project_type" in response.json()["error"]

    def test_blank_project_name(self, client: TestClient):
        response = generate(client, projectName="  ")
        assert response.status_code == 400

    def test_expiry_out_of_range(self, client: TestClient):
        """Absurd expiry values are rejected with the 400 envelope, not a crash"""
        response = generate(client, expiresInDays=10_000_000)

        assert response.status_code == 400
        assert "expiresInDays" in response.json()["error"]

    def test_wrong_type_uses_error_envelope(self, client: TestClient):
        response = generate(client, expiresInDays="soon")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_storage_failure_is_opaque(self, client: TestClient):
        app.dependency_overrides[get_link_service] = lambda: BrokenLinkService()

        response = generate(client)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestRedirect:
    """Test GET /api/redirect/{link_id}"""

    def test_redirects_to_original_url(self, client: TestClient):
        link_id = generate(client, originalUrl="https://github.com/example/sales-dashboard").json()["linkId"]

        response = client.get(f"/api/redirect/{link_id}", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "https://github.com/example/sales-dashboard"

    def test_project_page_without_url(self, client: TestClient):
        link_id = generate(client, description="Quarterly <b>sales</b> overview").json()["linkId"]

        response = client.get(f"/api/redirect/{link_id}")

        assert response.status_code == 200
        assert "Sales Dashboard" in response.text
        assert "Clicks:</strong> 1" in response.text
        assert "&lt;b&gt;sales&lt;/b&gt;" in response.text

    def test_unknown_and_expired_look_the_same(self, client: TestClient):
        expired_id = generate(client, expiresInDays=-1).json()["linkId"]

        unknown = client.get("/api/redirect/does-not-exist")
        expired = client.get(f"/api/redirect/{expired_id}")

        assert unknown.status_code == expired.status_code == 404
        assert unknown.text == expired.text

    def test_forwarded_ips_count_as_visitors(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(settings, "trust_forwarded_for", True)
        link_id = generate(client).json()["linkId"]
        for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
            client.get(
                f"/api/redirect/{link_id}",
                headers={"X-Forwarded-For": f"{ip}, 172.16.0.1", "Referer": "https://twitter.com"},
            )

        data = client.get(f"/api/analytics/detailed/{link_id}").json()

        assert data["clickAnalytics"][0]["clicks"] == 3
        assert data["clickAnalytics"][0]["unique_visitors"] == 3
        assert data["referrers"] == [{"referer": "https://twitter.com", "count": 3}]
        assert data["link"]["click_count"] == 3

    def test_forwarded_for_ignored_by_default(self, client: TestClient):
        """Without a trusted proxy the header cannot fake distinct visitors"""
        link_id = generate(client).json()["linkId"]
        for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
            client.get(f"/api/redirect/{link_id}", headers={"X-Forwarded-For": ip})

        data = client.get(f"/api/analytics/detailed/{link_id}").json()

        assert data["clickAnalytics"][0]["clicks"] == 3
        assert data["clickAnalytics"][0]["unique_visitors"] == 1


class TestAnalyticsEndpoints:
    """Test analytics and admin endpoints"""

    def test_link_analytics(self, client: TestClient):
        link_id = generate(client).json()["linkId"]
        client.get(f"/api/redirect/{link_id}")
        client.get(f"/api/redirect/{link_id}")

        response = client.get(f"/api/analytics/{link_id}")
        assert response.status_code == 200

        data = response.json()
        assert data["linkId"] == link_id
        assert data["projectName"] == "Sales Dashboard"
        assert data["totalClicks"] == 2
        assert data["isActive"] is True

    def test_link_analytics_not_found(self, client: TestClient):
        assert client.get("/api/analytics/does-not-exist").status_code == 404
        assert client.get("/api/analytics/detailed/does-not-exist").status_code == 404

    def test_not_found_uses_error_envelope(self, client: TestClient):
        summary = client.get("/api/analytics/does-not-exist")
        detailed = client.get("/api/analytics/detailed/does-not-exist")

        assert summary.json() == {"error": "Link not found"}
        assert detailed.json() == {"error": "Link not found"}

    def test_admin_links(self, client: TestClient):
        link_id = generate(client).json()["linkId"]
        client.get(f"/api/redirect/{link_id}")

        rows = client.get("/api/admin/links").json()

        assert len(rows) == 1
        assert rows[0]["link_id"] == link_id
        assert rows[0]["total_clicks"] == 1
        assert rows[0]["click_count"] == 1

    def test_dashboard_shape(self, client: TestClient):
        link_id = generate(client).json()["linkId"]
        client.get(f"/api/redirect/{link_id}")
        client.post("/api/contact", json={
            "name": "Ada", "email": "ada@example.com",
            "subject": "Hello", "message": "Nice work"
        })

        data = client.get("/api/dashboard/analytics").json()

        assert set(data) == {"clickTrends", "projectTypes", "topLinks", "engagement", "recentActivity"}
        assert data["engagement"]["total_clicks"] == 1
        assert data["engagement"]["total_links"] == 1
        assert data["projectTypes"][0]["project_type"] == "Visualization"
        assert {item["type"] for item in data["recentActivity"]} == {"link_click", "message"}


class TestContact:
    """Test POST /api/contact"""

    def test_submit_contact(self, client: TestClient, notifier, db_session):
        response = client.post("/api/contact", json={
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "subject": "Collaboration",
            "message": "Loved the sales dashboard!"
        })
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Message sent successfully!"

        stored = db_session.get(ContactMessage, data["id"])
        assert stored.status == "unread"

        assert len(notifier.sent) == 1
        assert notifier.sent[0].id == data["id"]
        assert notifier.sent[0].subject == "Collaboration"

    def test_missing_field(self, client: TestClient, notifier, db_session):
        response = client.post("/api/contact", json={
            "name": "Ada", "email": "", "subject": "Hi", "message": "Hello"
        })

        assert response.status_code == 400
        assert db_session.query(ContactMessage).count() == 0
        assert notifier.sent == []

    def test_notifier_failure_does_not_fail_submission(self, client: TestClient, db_session):
        app.dependency_overrides[get_notifier] = lambda: ExplodingNotifier()

        response = client.post("/api/contact", json={
            "name": "Ada", "email": "ada@example.com", "subject": "Hi", "message": "Hello"
        })

        assert response.status_code == 200
        assert db_session.query(ContactMessage).count() == 1

    def test_messages_listed_for_admin(self, client: TestClient):
        client.post("/api/contact", json={
            "name": "Ada", "email": "ada@example.com", "subject": "Hi", "message": "Hello"
        })

        rows = client.get("/api/admin/messages").json()

        assert len(rows) == 1
        assert rows[0]["name"] == "Ada"
        assert rows[0]["status"] == "unread"
