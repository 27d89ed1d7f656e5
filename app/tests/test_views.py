from typing import get_args

from fastapi import status

from app.core.timetable import LESSON_SLOTS, SUBJECT_ICONS, TIME_SLOTS
from app.schemas.schedule import TimeSlot
from app.schemas.subject import SubjectIcon
from app.services.scheduling import assign_schedule


def add_lessons(db, seed):
    assign_schedule(db, seed["class_a"].id, seed["math"].id, seed["teacher"].id, 1, "08:20 - 09:10")
    assign_schedule(db, seed["class_a"].id, seed["science"].id, None, 1, "07:30 - 08:20")
    assign_schedule(db, seed["class_a"].id, seed["math"].id, seed["teacher"].id, 4, "13:30 - 14:20")
    assign_schedule(db, seed["class_b"].id, seed["math"].id, seed["teacher"].id, 2, "07:30 - 08:20")


def test_board_defaults_to_first_class(client, db_session, seed_data):
    add_lessons(db_session, seed_data)

    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()

    assert [item["name"] for item in data["classes"]] == ["6A", "6B"]
    assert data["selected_class"]["name"] == "6A"
    assert data["total_entries"] == 3
    assert [day["day_of_week"] for day in data["days"]] == [1, 2, 3, 4, 5]
    assert data["days"][0]["label"] == "Monday"

    monday = data["days"][0]["entries"]
    assert [item["time_slot"] for item in monday] == ["07:30 - 08:20", "08:20 - 09:10"]
    assert monday[0]["teacher"] is None
    assert monday[1]["teacher"]["full_name"] == "Ana Souza"
    assert monday[1]["subject"]["color"] == "#3B82F6"


def test_board_for_selected_class(client, db_session, seed_data):
    add_lessons(db_session, seed_data)

    data = client.get("/", params={"class_id": seed_data["class_b"].id}).json()

    assert data["selected_class"]["name"] == "6B"
    assert data["total_entries"] == 1
    assert data["days"][1]["entries"][0]["class_group"]["name"] == "6B"


def test_board_hides_break_slots(client, seed_data):
    data = client.get("/").json()
    assert data["lesson_slots"] == list(LESSON_SLOTS)
    assert "09:10 - 09:30" not in data["lesson_slots"]
    assert "15:10 - 15:30" not in data["lesson_slots"]


def test_board_unknown_class(client, seed_data):
    assert client.get("/", params={"class_id": 999}).status_code == status.HTTP_404_NOT_FOUND


def test_board_without_classes(client, db_session):
    data = client.get("/").json()
    assert data["classes"] == []
    assert data["selected_class"] is None
    assert all(day["entries"] == [] for day in data["days"])


def test_timetable_meta(client):
    data = client.get("/meta/timetable").json()
    assert len(data["days"]) == 5
    assert len(data["time_slots"]) == 11
    assert [slot["value"] for slot in data["time_slots"] if slot["is_break"]] == ["09:10 - 09:30", "15:10 - 15:30"]
    assert "book-open" in data["subject_icons"]


def test_schema_choices_follow_timetable():
    assert get_args(TimeSlot) == TIME_SLOTS
    assert get_args(SubjectIcon) == SUBJECT_ICONS


def test_admin_overview(client, db_session, seed_data, admin_headers):
    add_lessons(db_session, seed_data)

    response = client.get("/admin", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["profile"]["role"] == "admin"
    assert data["total_classes"] == 2
    assert data["total_subjects"] == 2
    assert data["total_teachers"] == 2
    assert data["total_schedules"] == 4


def test_teacher_dashboard(client, db_session, seed_data, teacher_headers):
    add_lessons(db_session, seed_data)

    response = client.get("/teacher", headers=teacher_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()

    assert data["profile"]["full_name"] == "Ana Souza"
    assert [subject["name"] for subject in data["subjects"]] == ["Mathematics"]
    assert data["stats"] == {"total_classes": 2, "total_subjects": 1, "weekly_hours": 3}
    assert [len(day["entries"]) for day in data["days"]] == [1, 1, 0, 1, 0]
