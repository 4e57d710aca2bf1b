"""
Tests for Classroom API Endpoints

Classroom CRUD, public academy pages, members and analytics.
"""

from httpx import AsyncClient

from harmonylearn.core.models import Classroom, ClassroomMembership, User


class TestCreateClassroom:
    async def test_create_with_branding_defaults(self, client: AsyncClient, master: User):
        response = await client.post(
            "/api/classrooms",
            json={
                "title": "Violin Studio",
                "subject": "Violin",
                "level": "Intermediate",
                "masterId": master.id,
                "customSlug": "Violin-Studio",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["customSlug"] == "violin-studio"
        assert data["primaryColor"] == "#3B82F6"
        assert data["secondaryColor"] == "#10B981"
        assert data["maxStudents"] == 50
        assert data["isPublic"] is True
        assert data["master"]["username"] == "yaa"
        assert data["memberships"] == []

    async def test_reject_bad_color(self, client: AsyncClient):
        response = await client.post(
            "/api/classrooms",
            json={"title": "X", "subject": "Drums", "level": "Beginner", "primaryColor": "blue"},
        )

        assert response.status_code == 400

    async def test_reject_bad_contact_email(self, client: AsyncClient):
        response = await client.post(
            "/api/classrooms",
            json={
                "title": "X",
                "subject": "Drums",
                "level": "Beginner",
                "contactEmail": "not-an-email",
            },
        )

        assert response.status_code == 400

    async def test_duplicate_slug_conflicts(self, client: AsyncClient, classroom: Classroom):
        response = await client.post(
            "/api/classrooms",
            json={
                "title": "Copycat",
                "subject": "Piano",
                "level": "Beginner",
                "customSlug": "accra-piano",
            },
        )

        assert response.status_code == 409


class TestReadClassroom:
    async def test_list(self, client: AsyncClient, classroom: Classroom):
        response = await client.get("/api/classrooms")

        assert response.status_code == 200
        assert [c["title"] for c in response.json()] == ["Piano Foundations"]

    async def test_get_detail(
        self,
        client: AsyncClient,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
    ):
        response = await client.get(f"/api/classrooms/{classroom.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["memberCount"] == 1
        assert data["memberships"][0]["role"] == "staff"
        assert data["memberships"][0]["user"]["username"] == "kofi"

    async def test_get_by_slug(self, client: AsyncClient, classroom: Classroom):
        response = await client.get("/api/classrooms/slug/accra-piano")

        assert response.status_code == 200
        assert response.json()["id"] == classroom.id

    async def test_slug_must_match_exactly(self, client: AsyncClient, classroom: Classroom):
        response = await client.get("/api/classrooms/slug/accra")

        assert response.status_code == 404
        assert response.json()["error"] == "Academy not found"

    async def test_each_slug_resolves_to_its_own_classroom(
        self, client: AsyncClient, classroom: Classroom
    ):
        first_id = classroom.id
        created = await client.post(
            "/api/classrooms",
            json={
                "title": "Drum Circle",
                "subject": "Drums",
                "level": "Beginner",
                "customSlug": "accra-drums",
            },
        )
        second_id = created.json()["id"]

        first = await client.get("/api/classrooms/slug/accra-piano")
        second = await client.get("/api/classrooms/slug/accra-drums")

        assert first.json()["id"] == first_id
        assert second.json()["id"] == second_id
        assert first_id != second_id

    async def test_members(
        self,
        client: AsyncClient,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
    ):
        response = await client.get(f"/api/classrooms/{classroom.id}/members")

        assert response.status_code == 200
        members = response.json()
        assert len(members) == 1
        assert members[0]["classroom"]["academyName"] == "Accra Piano Academy"

    async def test_analytics(
        self,
        client: AsyncClient,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
    ):
        response = await client.get(f"/api/classrooms/{classroom.id}/analytics")

        assert response.status_code == 200
        data = response.json()
        assert data["totalStaff"] == 1
        assert data["totalStudents"] == 0
        assert data["totalSessions"] == 0
        assert data["averageAttendance"] == 0
        assert len(data["recentActivity"]) == 1

    async def test_analytics_of_missing_classroom(self, client: AsyncClient):
        response = await client.get("/api/classrooms/9999/analytics")

        assert response.status_code == 404


class TestWriteClassroom:
    async def test_update(self, client: AsyncClient, classroom: Classroom):
        response = await client.patch(
            f"/api/classrooms/{classroom.id}",
            json={"about": "Since 1998", "primaryColor": "#ff0000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["about"] == "Since 1998"
        assert data["primaryColor"] == "#FF0000"
        assert data["title"] == "Piano Foundations"

    async def test_null_features_rejected(self, client: AsyncClient, classroom: Classroom):
        classroom_id = classroom.id

        response = await client.patch(f"/api/classrooms/{classroom_id}", json={"features": None})

        assert response.status_code == 400
        detail = await client.get(f"/api/classrooms/{classroom_id}")
        assert detail.json()["features"] == []

    async def test_delete_removes_memberships(
        self,
        client: AsyncClient,
        classroom: Classroom,
        staff_membership: ClassroomMembership,
    ):
        classroom_id = classroom.id

        response = await client.delete(f"/api/classrooms/{classroom_id}")
        assert response.status_code == 200

        assert (await client.get(f"/api/classrooms/{classroom_id}")).status_code == 404
        memberships = await client.get(f"/api/classroom-memberships?classroomId={classroom_id}")
        assert memberships.json() == []
