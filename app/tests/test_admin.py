from fastapi import status

from app.models import AuthUser, Schedule, TeacherSubject
from app.tests.utils import login


def test_class_crud(client, admin_headers):
    response = client.post("/admin/classes", json={"name": "7C", "description": "New group"}, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    class_id = response.json()["id"]

    names = [item["name"] for item in client.get("/admin/classes", headers=admin_headers).json()]
    assert names == ["6A", "6B", "7C"]

    response = client.patch(f"/admin/classes/{class_id}", json={"description": None}, headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["description"] is None
    assert response.json()["name"] == "7C"

    assert client.delete(f"/admin/classes/{class_id}", headers=admin_headers).json() == {"ok": True}
    assert client.delete(f"/admin/classes/{class_id}", headers=admin_headers).status_code == status.HTTP_404_NOT_FOUND


def test_duplicate_class_name(client, admin_headers):
    response = client.post("/admin/classes", json={"name": "6A"}, headers=admin_headers)
    assert response.status_code == status.HTTP_409_CONFLICT


def test_deleting_class_removes_its_schedule(client, db_session, seed_data, admin_headers):
    client.post(
        "/admin/schedules",
        json={"class_id": seed_data["class_a"].id, "subject_id": seed_data["math"].id,
              "day_of_week": 1, "time_slot": "07:30 - 08:20"},
        headers=admin_headers,
    )
    client.delete(f"/admin/classes/{seed_data['class_a'].id}", headers=admin_headers)
    assert db_session.query(Schedule).count() == 0


def test_subject_crud(client, admin_headers):
    response = client.post("/admin/subjects", json={"name": "Art", "icon": "palette", "color": "#EC4899"}, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    subject_id = response.json()["id"]

    response = client.patch(f"/admin/subjects/{subject_id}", json={"color": "#000000"}, headers=admin_headers)
    assert response.json()["color"] == "#000000"
    assert response.json()["icon"] == "palette"

    names = [item["name"] for item in client.get("/admin/subjects", headers=admin_headers).json()]
    assert names == ["Art", "Mathematics", "Science"]

    assert client.delete(f"/admin/subjects/{subject_id}", headers=admin_headers).status_code == status.HTTP_200_OK


def test_subject_defaults(client, admin_headers):
    response = client.post("/admin/subjects", json={"name": "Music"}, headers=admin_headers)
    assert response.json()["icon"] == "book-open"
    assert response.json()["color"] == "#3B82F6"


def test_subject_validation(client, admin_headers):
    bad_color = client.post("/admin/subjects", json={"name": "Art", "color": "pink"}, headers=admin_headers)
    assert bad_color.status_code == 422
    bad_icon = client.post("/admin/subjects", json={"name": "Art", "icon": "rocket"}, headers=admin_headers)
    assert bad_icon.status_code == 422


def test_create_teacher(client, seed_data, admin_headers):
    response = client.post(
        "/admin/teachers",
        json={
            "full_name": "Carla Dias",
            "email": "carla@example.com",
            "password": "teacher123",
            "subject_ids": [seed_data["science"].id, seed_data["math"].id],
        },
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert [subject["name"] for subject in data["subjects"]] == ["Mathematics", "Science"]

    teachers = client.get("/admin/teachers", headers=admin_headers).json()
    assert [teacher["full_name"] for teacher in teachers] == ["Ana Souza", "Bruno Lima", "Carla Dias"]

    headers = login(client, "carla@example.com", "teacher123")
    assert client.get("/teacher", headers=headers).status_code == status.HTTP_200_OK


def test_create_teacher_rejects_bad_input(client, seed_data, admin_headers):
    taken = client.post(
        "/admin/teachers",
        json={"full_name": "Ana Again", "email": "ana@example.com", "password": "teacher123"},
        headers=admin_headers,
    )
    assert taken.status_code == status.HTTP_409_CONFLICT

    unknown_subject = client.post(
        "/admin/teachers",
        json={"full_name": "Carla Dias", "email": "carla@example.com", "password": "teacher123", "subject_ids": [999]},
        headers=admin_headers,
    )
    assert unknown_subject.status_code == status.HTTP_400_BAD_REQUEST

    short_password = client.post(
        "/admin/teachers",
        json={"full_name": "Carla Dias", "email": "carla@example.com", "password": "abc"},
        headers=admin_headers,
    )
    assert short_password.status_code == 422

    long_password = client.post(
        "/admin/teachers",
        json={"full_name": "Carla Dias", "email": "carla@example.com", "password": "x" * 80},
        headers=admin_headers,
    )
    assert long_password.status_code == 422
    assert "at most 72 bytes" in long_password.text


def test_update_teacher_replaces_subjects(client, db_session, seed_data, admin_headers):
    teacher_id = seed_data["teacher"].id
    response = client.patch(
        f"/admin/teachers/{teacher_id}",
        json={"full_name": "Ana S. Souza", "email": "ana.souza@example.com", "subject_ids": [seed_data["science"].id]},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["full_name"] == "Ana S. Souza"
    assert [subject["name"] for subject in data["subjects"]] == ["Science"]
    assert db_session.query(TeacherSubject).filter(TeacherSubject.teacher_id == teacher_id).count() == 1

    # the login follows the new email
    login(client, "ana.souza@example.com", "teacher123")


def test_update_teacher_email_taken(client, seed_data, admin_headers):
    response = client.patch(
        f"/admin/teachers/{seed_data['teacher'].id}",
        json={"email": "bruno@example.com"},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_409_CONFLICT


def test_admin_is_not_a_teacher_record(client, seed_data, admin_headers):
    response = client.patch(f"/admin/teachers/{seed_data['admin'].id}", json={"full_name": "X"}, headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_teacher_keeps_schedule(client, db_session, seed_data, admin_headers):
    teacher_id = seed_data["teacher"].id
    created = client.post(
        "/admin/schedules",
        json={"class_id": seed_data["class_a"].id, "subject_id": seed_data["math"].id,
              "teacher_id": teacher_id, "day_of_week": 2, "time_slot": "10:20 - 11:10"},
        headers=admin_headers,
    )
    schedule_id = created.json()["id"]

    response = client.delete(f"/admin/teachers/{teacher_id}", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK

    db_session.expire_all()
    schedule = db_session.query(Schedule).filter(Schedule.id == schedule_id).one()
    assert schedule.teacher_id is None
    assert db_session.query(AuthUser).filter(AuthUser.id == teacher_id).first() is None
    assert db_session.query(TeacherSubject).filter(TeacherSubject.teacher_id == teacher_id).count() == 0

    failed = client.post("/login", json={"email": "ana@example.com", "password": "teacher123"})
    assert failed.status_code == status.HTTP_401_UNAUTHORIZED


def test_schedule_api(client, seed_data, admin_headers):
    payload = {
        "class_id": seed_data["class_a"].id,
        "subject_id": seed_data["math"].id,
        "teacher_id": seed_data["teacher"].id,
        "day_of_week": 3,
        "time_slot": "09:30 - 10:20",
    }
    response = client.post("/admin/schedules", json=payload, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["class_group"]["name"] == "6A"
    assert data["subject"]["name"] == "Mathematics"
    assert data["teacher"]["full_name"] == "Ana Souza"

    conflict = client.post("/admin/schedules", json={**payload, "subject_id": seed_data["science"].id}, headers=admin_headers)
    assert conflict.status_code == status.HTTP_409_CONFLICT

    double_booked = client.post(
        "/admin/schedules",
        json={**payload, "class_id": seed_data["class_b"].id},
        headers=admin_headers,
    )
    assert double_booked.status_code == status.HTTP_409_CONFLICT
    assert "Teacher" in double_booked.json()["detail"]

    client.post("/admin/schedules", json={**payload, "teacher_id": None, "day_of_week": 1}, headers=admin_headers)
    listed = client.get("/admin/schedules", params={"class_id": seed_data["class_a"].id}, headers=admin_headers).json()
    assert [(item["day_of_week"], item["time_slot"]) for item in listed] == [(1, "09:30 - 10:20"), (3, "09:30 - 10:20")]


def test_schedule_update_via_api(client, seed_data, admin_headers):
    base = {"class_id": seed_data["class_a"].id, "subject_id": seed_data["math"].id, "day_of_week": 1}
    first = client.post("/admin/schedules", json={**base, "time_slot": "07:30 - 08:20"}, headers=admin_headers).json()
    second = client.post("/admin/schedules", json={**base, "time_slot": "08:20 - 09:10"}, headers=admin_headers).json()

    clash = client.patch(f"/admin/schedules/{second['id']}", json={"time_slot": "07:30 - 08:20"}, headers=admin_headers)
    assert clash.status_code == status.HTTP_409_CONFLICT

    moved = client.patch(f"/admin/schedules/{first['id']}", json={"day_of_week": 5}, headers=admin_headers)
    assert moved.status_code == status.HTTP_200_OK
    assert moved.json()["day_of_week"] == 5

    missing = client.patch("/admin/schedules/999", json={"day_of_week": 2}, headers=admin_headers)
    assert missing.status_code == status.HTTP_404_NOT_FOUND


def test_schedule_validation(client, seed_data, admin_headers):
    payload = {"class_id": seed_data["class_a"].id, "subject_id": seed_data["math"].id, "time_slot": "07:30 - 08:20"}
    assert client.post("/admin/schedules", json={**payload, "day_of_week": 6}, headers=admin_headers).status_code == 422
    assert client.post("/admin/schedules", json={**payload, "day_of_week": 0}, headers=admin_headers).status_code == 422
    assert client.post(
        "/admin/schedules", json={**payload, "day_of_week": 1, "time_slot": "12:00 - 13:30"}, headers=admin_headers
    ).status_code == 422
    assert client.post(
        "/admin/schedules", json={**payload, "day_of_week": 1, "class_id": 999}, headers=admin_headers
    ).status_code == status.HTTP_400_BAD_REQUEST


def test_schedule_delete_is_idempotent(client, seed_data, admin_headers):
    created = client.post(
        "/admin/schedules",
        json={"class_id": seed_data["class_a"].id, "subject_id": seed_data["math"].id,
              "day_of_week": 1, "time_slot": "07:30 - 08:20"},
        headers=admin_headers,
    ).json()

    first = client.delete(f"/admin/schedules/{created['id']}", headers=admin_headers)
    second = client.delete(f"/admin/schedules/{created['id']}", headers=admin_headers)

    assert first.json() == {"ok": True, "deleted": 1}
    assert second.status_code == status.HTTP_200_OK
    assert second.json() == {"ok": True, "deleted": 0}
