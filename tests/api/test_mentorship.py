"""
Tests for Mentorship API Endpoints

Mentorship requests, conversation threads and sessions.
"""

from datetime import datetime

from httpx import AsyncClient

from harmonylearn.core.models import MentorshipRequest, User


class TestMentorshipRequests:
    async def test_create_pending(self, client: AsyncClient, student: User, mentor: User):
        response = await client.post(
            "/api/mentorship-requests",
            json={
                "studentId": student.id,
                "mentorId": mentor.id,
                "subject": "Improvisation",
                "goals": "Solo over a blues",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["student"]["username"] == "ama"
        assert data["conversations"] == []
        assert data["sessions"] == []

    async def test_filter_by_mentor(
        self, client: AsyncClient, mentor: User, mentorship_request: MentorshipRequest
    ):
        response = await client.get(f"/api/mentorship-requests?mentorId={mentor.id}&status=pending")

        assert [r["id"] for r in response.json()] == [mentorship_request.id]

    async def test_mentor_response_stamps_responded_at(
        self, client: AsyncClient, mentorship_request: MentorshipRequest
    ):
        response = await client.patch(
            f"/api/mentorship-requests/{mentorship_request.id}",
            json={"status": "approved", "mentorResponse": "Happy to help"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "approved"
        assert data["respondedAt"] is not None

    async def test_delete(self, client: AsyncClient, mentorship_request: MentorshipRequest):
        request_id = mentorship_request.id

        response = await client.delete(f"/api/mentorship-requests/{request_id}")

        assert response.json() == {"message": "Mentorship request deleted successfully"}
        assert (await client.get(f"/api/mentorship-requests/{request_id}")).status_code == 404


class TestConversations:
    async def test_thread_oldest_first(
        self,
        client: AsyncClient,
        student: User,
        mentor: User,
        mentorship_request: MentorshipRequest,
    ):
        for sender, text in [(student, "Hello!"), (mentor, "Hi, when are you free?")]:
            response = await client.post(
                "/api/mentor-conversations",
                json={
                    "mentorshipRequestId": mentorship_request.id,
                    "senderId": sender.id,
                    "message": text,
                },
            )
            assert response.status_code == 201
            assert response.json()["isRead"] is False

        response = await client.get(f"/api/mentor-conversations/{mentorship_request.id}")

        assert [m["message"] for m in response.json()] == ["Hello!", "Hi, when are you free?"]

    async def test_mark_read(
        self, client: AsyncClient, student: User, mentorship_request: MentorshipRequest
    ):
        created = await client.post(
            "/api/mentor-conversations",
            json={
                "mentorshipRequestId": mentorship_request.id,
                "senderId": student.id,
                "message": "Ping",
            },
        )

        response = await client.patch(f"/api/mentor-conversations/{created.json()['id']}/read")

        assert response.status_code == 200
        assert response.json()["isRead"] is True

    async def test_message_on_missing_request(self, client: AsyncClient, student: User):
        response = await client.post(
            "/api/mentor-conversations",
            json={"mentorshipRequestId": 9999, "senderId": student.id, "message": "Anyone?"},
        )

        assert response.status_code == 404


class TestMentorshipSessions:
    async def test_book_and_complete(
        self,
        client: AsyncClient,
        student: User,
        mentor: User,
        mentorship_request: MentorshipRequest,
        next_week: datetime,
    ):
        response = await client.post(
            "/api/mentorship-sessions",
            json={
                "mentorshipRequestId": mentorship_request.id,
                "mentorId": mentor.id,
                "studentId": student.id,
                "scheduledAt": next_week.isoformat(),
                "title": "First lesson",
            },
        )
        assert response.status_code == 201
        session = response.json()
        assert session["status"] == "scheduled"
        assert session["duration"] == 60

        response = await client.patch(
            f"/api/mentorship-sessions/{session['id']}", json={"status": "completed"}
        )
        assert response.json()["status"] == "completed"

        listed = await client.get(f"/api/mentorship-sessions?studentId={student.id}")
        assert len(listed.json()) == 1

        detail = await client.get(f"/api/mentorship-requests/{mentorship_request.id}")
        assert detail.json()["sessions"][0]["title"] == "First lesson"

    async def test_get_missing_session(self, client: AsyncClient):
        response = await client.get("/api/mentorship-sessions/9999")

        assert response.status_code == 404
