"""
Tests for the team API endpoints.
"""

import pytest
from django.test import Client

from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.tests.factories import TeamFactory
from ssr_connect.teams.tests.factories import member_payload
from ssr_connect.users.tests.factories import AdminFactory
from ssr_connect.users.tests.factories import MentorFactory
from ssr_connect.users.tests.factories import StudentFactory


@pytest.fixture
def team_payload(mentor):
    return {
        "project_title": "Cyber hygiene workshops",
        "pillar": "CYBERSECURITY_AWARENESS",
        "batch": "AI_A",
        "mentor_id": str(mentor.id),
        "members": member_payload(3),
    }


@pytest.mark.django_db
class TestCreateTeamEndpoint:
    """Tests for POST /api/teams/."""

    def test_student_creates_team(self, student_client, team_payload):
        response = student_client.post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code == 201
        data = response.json()
        assert data["team_number"] == "SSR 25-001"
        assert data["status"] == "PENDING"
        assert len(data["members"]) == 4
        assert data["members"][0]["role"] == "LEADER"

    def test_two_members_returns_validation_error(self, student_client, team_payload):
        team_payload["members"] = member_payload(2)

        response = student_client.post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert Team.objects.count() == 0

    def test_unknown_pillar_is_rejected_before_service(self, student_client, team_payload):
        team_payload["pillar"] = "ASTRONOMY"

        response = student_client.post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_taken_number_conflicts(self, student_client, team_payload):
        TeamFactory(batch="AI_A", team_number="SSR 25-004")
        team_payload["team_number"] = "SSR 25-004"

        response = student_client.post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_mentor_cannot_create(self, mentor_client, team_payload):
        response = mentor_client.post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code == 403
        assert response.json()["code"] == "AUTHORIZATION_ERROR"

    def test_anonymous_cannot_create(self, team_payload):
        response = Client().post("/api/teams/", data=team_payload, content_type="application/json")

        assert response.status_code in (401, 403)


@pytest.mark.django_db
class TestReadTeamEndpoints:
    def test_my_team_for_member(self, login_as):
        team = TeamFactory()
        member = team.members.exclude(user=team.leader).first().user

        response = login_as(member).get("/api/teams/my")

        assert response.status_code == 200
        assert response.json()["id"] == str(team.id)

    def test_my_team_without_team(self, student_client):
        response = student_client.get("/api/teams/my")

        assert response.status_code == 404

    def test_team_detail_visibility(self, login_as):
        team = TeamFactory()

        assert login_as(team.leader).get(f"/api/teams/{team.id}").status_code == 200
        assert login_as(team.mentor).get(f"/api/teams/{team.id}").status_code == 200
        assert login_as(AdminFactory()).get(f"/api/teams/{team.id}").status_code == 200
        assert login_as(MentorFactory()).get(f"/api/teams/{team.id}").status_code == 403
        assert login_as(StudentFactory()).get(f"/api/teams/{team.id}").status_code == 403

    def test_batches(self, student_client):
        TeamFactory(batch="CSE_D", team_number="SSR 25-078")

        response = student_client.get("/api/teams/batches")

        assert response.status_code == 200
        cse_d = next(b for b in response.json() if b["value"] == "CSE_D")
        assert cse_d == {"value": "CSE_D", "label": "CSE-D", "available": 12, "total": 13}

    def test_numbers(self, student_client):
        TeamFactory(batch="CSE_D", team_number="SSR 25-078")

        response = student_client.get("/api/teams/numbers?batch=CSE_D")

        assert response.status_code == 200
        data = response.json()
        assert data["next"] == "SSR 25-079"
        assert "SSR 25-078" not in data["available"]
        assert data["available"][-1] == "SSR 25-161"

    def test_numbers_unknown_batch(self, student_client):
        response = student_client.get("/api/teams/numbers?batch=MBA")

        assert response.status_code == 400


@pytest.mark.django_db
class TestUpdateTeamEndpoint:
    def test_leader_resubmits(self, login_as):
        team = TeamFactory(status=TeamStatus.REJECTED)

        response = login_as(team.leader).put(
            "/api/teams/my",
            data={"project_title": "Revised title"},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["status"] == "PENDING"
        assert response.json()["status_message"] == "Please rework the project title."

    def test_pending_team_conflicts(self, login_as):
        team = TeamFactory()

        response = login_as(team.leader).put(
            "/api/teams/my",
            data={"project_title": "Revised title"},
            content_type="application/json",
        )

        assert response.status_code == 409


@pytest.mark.django_db
class TestMentorTeamEndpoints:
    def test_lists_only_assigned_teams(self, login_as):
        team = TeamFactory()
        TeamFactory()

        response = login_as(team.mentor).get("/api/mentor/teams/")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [str(team.id)]

    def test_status_filter(self, login_as):
        mentor = MentorFactory()
        TeamFactory(mentor=mentor)
        approved = TeamFactory(mentor=mentor, status=TeamStatus.APPROVED)

        response = login_as(mentor).get("/api/mentor/teams/?status=APPROVED")

        assert [t["id"] for t in response.json()] == [str(approved.id)]

    def test_approve(self, login_as):
        team = TeamFactory()

        response = login_as(team.mentor).post(
            f"/api/mentor/teams/{team.id}/decision",
            data={"decision": "APPROVE"},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["status"] == "APPROVED"

    def test_reject_without_reason(self, login_as):
        team = TeamFactory()

        response = login_as(team.mentor).post(
            f"/api/mentor/teams/{team.id}/decision",
            data={"decision": "REJECT"},
            content_type="application/json",
        )

        assert response.status_code == 400

    def test_unassigned_mentor(self, login_as):
        team = TeamFactory()

        response = login_as(MentorFactory()).post(
            f"/api/mentor/teams/{team.id}/decision",
            data={"decision": "APPROVE"},
            content_type="application/json",
        )

        assert response.status_code == 403
        assert Team.objects.get(pk=team.pk).status == TeamStatus.PENDING

    def test_student_is_denied(self, login_as):
        team = TeamFactory()

        response = login_as(team.leader).post(
            f"/api/mentor/teams/{team.id}/decision",
            data={"decision": "APPROVE"},
            content_type="application/json",
        )

        assert response.status_code == 403
