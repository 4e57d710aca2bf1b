"""
Tests for Course API Endpoints

Courses, lessons and reviews.
"""

from httpx import AsyncClient

from harmonylearn.core.models import Course, User


class TestCourseCrud:
    async def test_create_course_with_defaults(self, client: AsyncClient, mentor: User):
        response = await client.post(
            "/api/courses",
            json={
                "title": "Music Theory 101",
                "category": "Theory",
                "level": "Beginner",
                "mentorId": mentor.id,
                "price": 49.99,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "draft"
        assert data["difficulty"] == 1
        assert data["maxStudents"] == 100
        assert data["tags"] == []
        assert data["mentor"]["username"] == "kofi"
        assert data["lessons"] == []

    async def test_create_requires_title(self, client: AsyncClient):
        response = await client.post("/api/courses", json={"category": "Theory", "level": "Beginner"})

        assert response.status_code == 400
        fields = [detail["field"] for detail in response.json()["details"]]
        assert "body.title" in fields

    async def test_list_courses(self, client: AsyncClient, course: Course):
        response = await client.get("/api/courses")

        assert response.status_code == 200
        courses = response.json()
        assert len(courses) == 1
        assert courses[0]["enrollmentCount"] == 0

    async def test_get_missing_course(self, client: AsyncClient):
        response = await client.get("/api/courses/9999")

        assert response.status_code == 404
        assert response.json()["error"] == "Course not found"

    async def test_update_status(self, client: AsyncClient, course: Course):
        response = await client.patch(
            f"/api/courses/{course.id}", json={"status": "active", "adminNotes": "Looks good"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert data["adminNotes"] == "Looks good"
        assert data["title"] == "Guitar Basics"

    async def test_update_rejects_unknown_status(self, client: AsyncClient, course: Course):
        response = await client.patch(f"/api/courses/{course.id}", json={"status": "published"})

        assert response.status_code == 400

    async def test_delete_then_404(self, client: AsyncClient, course: Course):
        course_id = course.id

        response = await client.delete(f"/api/courses/{course_id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Course deleted successfully"}

        response = await client.get(f"/api/courses/{course_id}")
        assert response.status_code == 404


class TestLessonsAndReviews:
    async def test_lessons_listed_in_order(self, client: AsyncClient, course: Course):
        for order, title in [(2, "Strumming"), (1, "Holding the guitar")]:
            response = await client.post(
                f"/api/courses/{course.id}/lessons", json={"title": title, "sortOrder": order}
            )
            assert response.status_code == 201

        response = await client.get(f"/api/courses/{course.id}")
        titles = [lesson["title"] for lesson in response.json()["lessons"]]
        assert titles == ["Holding the guitar", "Strumming"]

    async def test_lesson_for_missing_course(self, client: AsyncClient):
        response = await client.post("/api/courses/9999/lessons", json={"title": "Orphan"})

        assert response.status_code == 404

    async def test_review_appears_on_course(
        self, client: AsyncClient, course: Course, student: User
    ):
        response = await client.post(
            f"/api/courses/{course.id}/reviews",
            json={"userId": student.id, "rating": 5, "comment": "Great course"},
        )
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "ama"

        response = await client.get(f"/api/courses/{course.id}")
        data = response.json()
        assert data["reviewCount"] == 1
        assert data["reviews"][0]["rating"] == 5

    async def test_rating_out_of_range(self, client: AsyncClient, course: Course, student: User):
        response = await client.post(
            f"/api/courses/{course.id}/reviews", json={"userId": student.id, "rating": 6}
        )

        assert response.status_code == 400

    async def test_second_review_by_same_user_conflicts(
        self, client: AsyncClient, course: Course, student: User
    ):
        path = f"/api/courses/{course.id}/reviews"
        payload = {"userId": student.id, "rating": 4}

        assert (await client.post(path, json=payload)).status_code == 201
        response = await client.post(path, json=payload)

        assert response.status_code == 409
        assert response.json()["kind"] == "conflict"
