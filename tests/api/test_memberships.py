"""
Tests for Classroom Membership API Endpoints
"""

from httpx import AsyncClient

from harmonylearn.core.models import Classroom, ClassroomMembership, User


class TestMemberships:
    async def test_join_defaults_to_active_student(
        self, client: AsyncClient, student: User, classroom: Classroom
    ):
        response = await client.post(
            "/api/classroom-memberships",
            json={"userId": student.id, "classroomId": classroom.id},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["role"] == "student"
        assert data["status"] == "active"
        assert data["user"]["role"] == "student"
        assert data["classroom"]["title"] == "Piano Foundations"

    async def test_filter_by_classroom_and_role(
        self,
        client: AsyncClient,
        student: User,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
    ):
        await client.post(
            "/api/classroom-memberships",
            json={"userId": student.id, "classroomId": classroom.id},
        )

        everyone = await client.get(f"/api/classroom-memberships?classroomId={classroom.id}")
        staff = await client.get(
            f"/api/classroom-memberships?classroomId={classroom.id}&role=staff"
        )

        assert len(everyone.json()) == 2
        assert [m["user"]["username"] for m in staff.json()] == ["kofi"]

    async def test_reject_unknown_role(
        self, client: AsyncClient, student: User, classroom: Classroom
    ):
        response = await client.post(
            "/api/classroom-memberships",
            json={"userId": student.id, "classroomId": classroom.id, "role": "owner"},
        )

        assert response.status_code == 400

    async def test_deactivate(self, client: AsyncClient, staff_membership: ClassroomMembership):
        response = await client.patch(
            f"/api/classroom-memberships/{staff_membership.id}", json={"status": "inactive"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "inactive"
        assert response.json()["role"] == "staff"

    async def test_update_missing(self, client: AsyncClient):
        response = await client.patch("/api/classroom-memberships/9999", json={"status": "inactive"})

        assert response.status_code == 404

    async def test_delete(self, client: AsyncClient, staff_membership: ClassroomMembership):
        response = await client.delete(f"/api/classroom-memberships/{staff_membership.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Membership deleted successfully"}

    async def test_joining_twice_conflicts(
        self, client: AsyncClient, mentor: User, classroom: Classroom, staff_membership
    ):
        payload = {"userId": mentor.id, "classroomId": classroom.id}

        response = await client.post("/api/classroom-memberships", json=payload)

        assert response.status_code == 409
