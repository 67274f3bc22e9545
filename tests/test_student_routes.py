from tests.support import fk_violation, profile_row, unique_violation


def test_create_profile(client, fake_db):
    fake_db.queue([profile_row()])

    response = client.post("/api/students", json={"user_id": 1, "name": "Asha Rao", "school": "IIT Delhi"})

    assert response.status_code == 201
    assert response.json()["student_profile"]["id"] == 3
    params = fake_db.last_params
    assert params["user_id"] == 1
    assert params["major"] is None


def test_create_profile_requires_user_and_name(client, fake_db):
    response = client.post("/api/students", json={"user_id": 1, "name": ""})

    assert response.status_code == 400
    assert fake_db.calls == []


def test_second_profile_for_user_is_a_conflict(client, fake_db):
    fake_db.queue(unique_violation())

    response = client.post("/api/students", json={"user_id": 1, "name": "Asha"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Student profile already exists for this user"


def test_profile_for_missing_user_is_not_found(client, fake_db):
    fake_db.queue(fk_violation())

    response = client.post("/api/students", json={"user_id": 404, "name": "Asha"})

    assert response.status_code == 404


def test_list_profiles_with_filters(client, fake_db):
    fake_db.queue([profile_row()])

    response = client.get("/api/students", params={"school": "iit", "q": "asha"})

    assert response.status_code == 200
    assert len(response.json()["student_profiles"]) == 1
    assert "sp.school ILIKE :school" in fake_db.last_sql
    assert "sp.major" not in fake_db.last_sql
    assert "(sp.name ILIKE :q OR sp.resume_url ILIKE :q OR sp.portfolio_link ILIKE :q)" in fake_db.last_sql
    assert fake_db.last_params == {"school": "%iit%", "q": "%asha%"}


def test_list_profiles_without_filters(client, fake_db):
    client.get("/api/students")

    assert "WHERE" not in fake_db.last_sql
    assert fake_db.last_sql.endswith("ORDER BY sp.id DESC")


def test_get_by_user(client, fake_db):
    fake_db.queue([profile_row()])

    response = client.get("/api/students/user/1")

    assert response.status_code == 200
    assert fake_db.last_params == {"user_id": 1}


def test_get_by_user_missing(client):
    assert client.get("/api/students/user/1").status_code == 404


def test_patch_updates_only_supplied_fields(client, fake_db):
    fake_db.queue([profile_row(major="Design", resume_url=None)])

    response = client.patch("/api/students/3", json={"major": "Design", "resume_url": None})

    assert response.status_code == 200
    assert fake_db.last_sql == (
        "UPDATE student_profiles SET major = :major, resume_url = :resume_url WHERE id = :_key RETURNING *"
    )
    assert fake_db.last_params == {"major": "Design", "resume_url": None, "_key": 3}


def test_patch_ignores_null_name(client, fake_db):
    response = client.patch("/api/students/3", json={"name": None})

    assert response.status_code == 400
    assert response.json() == {"detail": "Provide at least one field to update"}
    assert fake_db.calls == []


def test_repeated_patch_issues_identical_statement(client, fake_db):
    fake_db.queue([profile_row(school="MIT")], [profile_row(school="MIT")])

    first = client.patch("/api/students/3", json={"school": "MIT"})
    second = client.patch("/api/students/3", json={"school": "MIT"})

    assert first.json() == second.json()
    assert fake_db.calls[0] == fake_db.calls[1]


def test_delete_profile(client, fake_db):
    fake_db.queue([{"id": 3}])

    response = client.delete("/api/students/3")

    assert response.json() == {"message": "Student profile deleted", "id": 3}
