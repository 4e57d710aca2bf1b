"""
Tests for Workflow Request API Endpoints

Staff, master-role and resignation requests and their review side effects.
"""

from datetime import datetime

from httpx import AsyncClient

from harmonylearn.core.models import Classroom, ClassroomMembership, User

MASTER_ROLE_APPLICATION = {
    "experience": "12 years teaching piano",
    "qualifications": "LRSM diploma",
    "motivation": "Open an academy in Kumasi",
}


class TestStaffRequests:
    async def test_create_pending(self, client: AsyncClient, mentor: User, classroom: Classroom):
        response = await client.post(
            "/api/staff-requests",
            json={"mentorId": mentor.id, "classroomId": classroom.id, "message": "Hire me"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["reviewedAt"] is None
        assert data["mentor"]["username"] == "kofi"
        assert data["classroom"]["title"] == "Piano Foundations"

    async def test_approval_makes_mentor_staff(
        self, client: AsyncClient, mentor: User, master: User, classroom: Classroom
    ):
        created = await client.post(
            "/api/staff-requests", json={"mentorId": mentor.id, "classroomId": classroom.id}
        )
        request_id = created.json()["id"]

        response = await client.patch(
            f"/api/staff-requests/{request_id}/status",
            json={"status": "approved", "reviewedBy": master.id, "adminNotes": "Welcome"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "approved"
        assert data["reviewedAt"] is not None
        assert data["reviewer"]["username"] == "yaa"

        staff = await client.get(f"/api/mentors/{mentor.id}/staff-classroom")
        assert staff.status_code == 200
        assert staff.json()["classroomId"] == classroom.id

    async def test_filter_by_status(self, client: AsyncClient, mentor: User, classroom: Classroom):
        await client.post(
            "/api/staff-requests", json={"mentorId": mentor.id, "classroomId": classroom.id}
        )

        pending = await client.get("/api/staff-requests?status=pending")
        approved = await client.get(f"/api/staff-requests?status=approved&classroomId={classroom.id}")

        assert len(pending.json()) == 1
        assert approved.json() == []

    async def test_reject_unknown_status(
        self, client: AsyncClient, mentor: User, classroom: Classroom
    ):
        created = await client.post(
            "/api/staff-requests", json={"mentorId": mentor.id, "classroomId": classroom.id}
        )

        response = await client.patch(
            f"/api/staff-requests/{created.json()['id']}/status", json={"status": "maybe"}
        )

        assert response.status_code == 400

    async def test_delete(self, client: AsyncClient, mentor: User, classroom: Classroom):
        created = await client.post(
            "/api/staff-requests", json={"mentorId": mentor.id, "classroomId": classroom.id}
        )

        response = await client.delete(f"/api/staff-requests/{created.json()['id']}")

        assert response.json() == {"message": "Staff request deleted successfully"}
        assert (await client.get(f"/api/staff-requests/{created.json()['id']}")).status_code == 404


class TestMasterRoleRequests:
    async def test_create(self, client: AsyncClient, mentor: User):
        response = await client.post(
            "/api/master-role-requests", json={"mentorId": mentor.id, **MASTER_ROLE_APPLICATION}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["approvedAt"] is None

    async def test_fields_of_other_request_types_rejected(self, client: AsyncClient, mentor: User):
        response = await client.post(
            "/api/master-role-requests",
            json={"mentorId": mentor.id, "reason": "Leaving", "plannedClassrooms": "3"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid field names. Expected: mentorId")

    async def test_missing_motivation(self, client: AsyncClient, mentor: User):
        payload = {"mentorId": mentor.id, **MASTER_ROLE_APPLICATION}
        del payload["motivation"]

        response = await client.post("/api/master-role-requests", json=payload)

        assert response.status_code == 400

    async def test_approval_promotes_mentor(
        self, client: AsyncClient, mentor: User, master: User
    ):
        created = await client.post(
            "/api/master-role-requests", json={"mentorId": mentor.id, **MASTER_ROLE_APPLICATION}
        )

        response = await client.patch(
            f"/api/master-role-requests/{created.json()['id']}/status",
            json={"status": "approved", "reviewedBy": master.id},
        )

        data = response.json()
        assert data["approvedAt"] is not None
        assert data["reviewedAt"] is not None
        assert data["rejectedAt"] is None

        user = (await client.get(f"/api/users/{mentor.id}")).json()
        assert user["isMaster"] is True
        assert user["role"] == "master"

    async def test_rejection_keeps_role(self, client: AsyncClient, mentor: User):
        created = await client.post(
            "/api/master-role-requests", json={"mentorId": mentor.id, **MASTER_ROLE_APPLICATION}
        )

        response = await client.patch(
            f"/api/master-role-requests/{created.json()['id']}/status",
            json={"status": "rejected", "adminNotes": "Need more experience"},
        )

        assert response.json()["rejectedAt"] is not None
        user = (await client.get(f"/api/users/{mentor.id}")).json()
        assert user["role"] == "mentor"


class TestResignationRequests:
    async def test_approval_deactivates_staff_membership(
        self,
        client: AsyncClient,
        mentor: User,
        master: User,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
        next_week: datetime,
    ):
        created = await client.post(
            "/api/resignation-requests",
            json={
                "mentorId": mentor.id,
                "classroomId": classroom.id,
                "reason": "Going back to school",
                "lastWorkDate": next_week.isoformat(),
            },
        )
        assert created.status_code == 201
        assert created.json()["status"] == "pending"

        response = await client.patch(
            f"/api/resignation-requests/{created.json()['id']}/status",
            json={"status": "approved", "reviewedBy": master.id, "masterNotes": "Good luck"},
        )

        assert response.status_code == 200
        assert response.json()["masterNotes"] == "Good luck"
        members = await client.get(f"/api/classrooms/{classroom.id}/members")
        assert members.json()[0]["status"] == "inactive"
        staff = await client.get(f"/api/mentors/{mentor.id}/staff-classroom")
        assert staff.status_code == 404

    async def test_requires_reason(
        self, client: AsyncClient, mentor: User, classroom: Classroom, next_week: datetime
    ):
        response = await client.post(
            "/api/resignation-requests",
            json={
                "mentorId": mentor.id,
                "classroomId": classroom.id,
                "lastWorkDate": next_week.isoformat(),
            },
        )

        assert response.status_code == 400

    async def test_review_missing_request(self, client: AsyncClient):
        response = await client.patch(
            "/api/resignation-requests/9999/status", json={"status": "approved"}
        )

        assert response.status_code == 404
