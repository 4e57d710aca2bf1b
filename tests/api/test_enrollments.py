"""
Tests for Enrollment API Endpoints
"""

from httpx import AsyncClient

from harmonylearn.core.models import Course, User


async def enroll(client: AsyncClient, user_id: int, course_id: int, **extra) -> dict:
    response = await client.post(
        "/api/enrollments", json={"userId": user_id, "courseId": course_id, **extra}
    )
    assert response.status_code == 201
    return response.json()


class TestEnrollments:
    async def test_enroll_student(self, client: AsyncClient, student: User, course: Course):
        data = await enroll(client, student.id, course.id)

        assert data["status"] == "active"
        assert data["progress"] == 0
        assert data["completedAt"] is None
        assert data["user"]["username"] == "ama"
        assert data["course"]["title"] == "Guitar Basics"

    async def test_list_by_user_and_course(
        self, client: AsyncClient, student: User, course: Course
    ):
        await enroll(client, student.id, course.id)

        by_user = await client.get(f"/api/enrollments/user/{student.id}")
        by_course = await client.get(f"/api/enrollments/course/{course.id}")
        everything = await client.get("/api/enrollments")

        assert len(by_user.json()) == 1
        assert len(by_course.json()) == 1
        assert len(everything.json()) == 1

    async def test_completion_stamps_completed_at(
        self, client: AsyncClient, student: User, course: Course
    ):
        enrollment = await enroll(client, student.id, course.id)

        response = await client.patch(
            f"/api/enrollments/{enrollment['id']}", json={"status": "completed", "progress": 100}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["progress"] == 100
        assert data["completedAt"] is not None

    async def test_progress_bounds(self, client: AsyncClient, student: User, course: Course):
        enrollment = await enroll(client, student.id, course.id)

        response = await client.patch(
            f"/api/enrollments/{enrollment['id']}", json={"progress": 150}
        )

        assert response.status_code == 400

    async def test_delete_enrollment(self, client: AsyncClient, student: User, course: Course):
        enrollment = await enroll(client, student.id, course.id)

        response = await client.delete(f"/api/enrollments/{enrollment['id']}")
        assert response.json() == {"message": "Enrollment deleted successfully"}

        response = await client.delete(f"/api/enrollments/{enrollment['id']}")
        assert response.status_code == 404

    async def test_duplicate_enrollment_conflicts(
        self, client: AsyncClient, student: User, course: Course
    ):
        user_id, course_id = student.id, course.id
        await enroll(client, user_id, course_id)

        response = await client.post(
            "/api/enrollments", json={"userId": user_id, "courseId": course_id}
        )

        assert response.status_code == 409
