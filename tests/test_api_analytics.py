import pytest


def test_degree_progress(client, auth_headers, add_subject):
    for i in range(10):
        add_subject(f"C{i}9", "B")   # 10 x 9 credits
    res = client.get("/v1/analytics/degree-progress", headers=auth_headers)
    assert res.json()["data"] == {
        "completedCredits": 90,
        "totalCredits": 120,
        "percentage": 75.0,
        "remainingCredits": 30,
        "degreeName": "Computer Science",
    }


def test_update_degree_progress(client, auth_headers):
    res = client.put("/v1/analytics/degree-progress", headers=auth_headers,
                     json={"totalCredits": 130, "degreeName": "  Mathematics "})
    assert res.status_code == 200
    assert res.json()["data"] == {"degreeTotalCredits": 130, "degreeName": "Mathematics"}

    data = client.get("/v1/analytics/degree-progress", headers=auth_headers).json()["data"]
    assert data["totalCredits"] == 130
    assert data["degreeName"] == "Mathematics"


def test_update_degree_progress_is_all_or_nothing(client, auth_headers):
    for body in ({"totalCredits": 0, "degreeName": "Physics"},
                 {"totalCredits": 100, "degreeName": "   "},
                 {"totalCredits": 12.5},
                 {}):
        res = client.put("/v1/analytics/degree-progress", headers=auth_headers, json=body)
        assert res.status_code == 400, body

    data = client.get("/v1/analytics/degree-progress", headers=auth_headers).json()["data"]
    assert data["totalCredits"] == 120
    assert data["degreeName"] == "Computer Science"


def test_semester_history(client, auth_headers, add_subject):
    add_subject("CS203", "B", year=2, semester=1)
    add_subject("CS103", "A", year=1, semester=1)
    add_subject("CS114", "C", year=1, semester=2)

    history = client.get("/v1/analytics/semester-history", headers=auth_headers).json()["data"]
    assert history == [
        {"label": "Year 1 Sem 1", "year": 1, "semester": 1, "gpa": 4.0, "credits": 3, "subjectCount": 1},
        {"label": "Year 1 Sem 2", "year": 1, "semester": 2, "gpa": 2.0, "credits": 4, "subjectCount": 1},
        {"label": "Year 2 Sem 1", "year": 2, "semester": 1, "gpa": 3.0, "credits": 3, "subjectCount": 1},
    ]


def test_subject_performance(client, auth_headers, add_subject):
    add_subject("AAA103", "A")
    add_subject("FFF103", "F")
    add_subject("BBB103", "B")

    data = client.get("/v1/analytics/subject-performance", headers=auth_headers).json()["data"]
    assert data["best"][0]["subjectCode"] == "AAA103"
    assert data["best"][0]["points"] == 4.0
    assert data["worst"][0]["subjectCode"] == "FFF103"
    assert [s["subjectCode"] for s in data["worst"]] == ["FFF103", "BBB103", "AAA103"]


def _seed_sixty_credits_at_b(add_subject):
    for i in range(20):
        add_subject(f"B{i:02d}3", "B")


def test_target_gpa_reachable(client, auth_headers, add_subject):
    _seed_sixty_credits_at_b(add_subject)
    res = client.post("/v1/analytics/target-gpa", headers=auth_headers, json={"targetGPA": 3.2, "futureCredits": 60})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["currentGPA"] == 3.0
    assert data["completedCredits"] == 60
    assert data["remainingCredits"] == 60
    assert data["requiredGPA"] == 3.4
    assert data["minGradeRequired"] == "A-"
    assert data["estimatedSubjects"] == 20
    assert data["achievable"] is True


def test_target_gpa_unreachable(client, auth_headers, add_subject):
    _seed_sixty_credits_at_b(add_subject)
    data = client.post("/v1/analytics/target-gpa", headers=auth_headers,
                       json={"targetGPA": 3.5, "futureCredits": 30}).json()["data"]
    assert data["achievable"] is False
    assert data["requiredGPA"] == 4.5
    assert data["minGradeRequired"] is None
    assert data["estimatedSubjects"] == 10


def test_target_gpa_validation(client, auth_headers, add_subject):
    _seed_sixty_credits_at_b(add_subject)
    for body in ({"targetGPA": 4.5}, {"targetGPA": -1}, {"targetGPA": 3.0, "futureCredits": 61}, {}):
        res = client.post("/v1/analytics/target-gpa", headers=auth_headers, json=body)
        assert res.status_code == 400, body
        assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    res = client.post("/v1/analytics/target-gpa", headers=auth_headers, json={"targetGPA": 3.0, "futureCredits": 61})
    assert "(61)" in res.json()["error"]["message"]
    assert "(60)" in res.json()["error"]["message"]


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
def test_target_gpa_rejects_non_finite_values(client, auth_headers, add_subject, raw):
    _seed_sixty_credits_at_b(add_subject)
    res = client.post(
        "/v1/analytics/target-gpa",
        headers={**auth_headers, "Content-Type": "application/json"},
        content=f'{{"targetGPA": {raw}}}',
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_target_gpa_degree_completed(client, auth_headers, add_subject):
    client.put("/v1/analytics/degree-progress", headers=auth_headers, json={"totalCredits": 9})
    add_subject("CS109", "B")
    data = client.post("/v1/analytics/target-gpa", headers=auth_headers, json={"targetGPA": 3.5}).json()["data"]
    assert data["achievable"] is True
    assert data["requiredGPA"] is None
    assert data["subjectsNeeded"] == 0
    assert data["degreeCompleted"] is True
    assert data["message"] == "Degree already completed"


def test_summary(client, auth_headers, add_subject):
    add_subject("CS203", "B", year=2, semester=1)
    add_subject("CS103", "A", year=1, semester=1)

    data = client.get("/v1/analytics/summary", headers=auth_headers).json()["data"]
    assert data["overallGPA"] == 3.5
    assert data["totalCredits"] == 6
    assert data["totalSubjects"] == 2
    assert data["degreeTotalCredits"] == 120
    assert data["semesterGPAs"] == [
        {"semester": "Y1S1", "gpa": 4.0, "credits": 3, "subjects": 1},
        {"semester": "Y2S1", "gpa": 3.0, "credits": 3, "subjects": 1},
    ]
    assert data["user"] == {"name": "Ada Lovelace", "email": "ada@example.com"}


def test_credit_categories(client, auth_headers):
    data = client.get("/v1/analytics/credit-categories", headers=auth_headers).json()["data"]
    assert data == {"coreSubjects": 24, "majorRequirements": 84, "electives": 24, "generalEducation": 12}

    body = {"coreSubjects": 30, "majorRequirements": 60, "electives": 20, "generalEducation": 10}
    res = client.put("/v1/analytics/credit-categories", headers=auth_headers, json=body)
    assert res.status_code == 200
    assert res.json()["data"] == body

    for bad in ({**body, "electives": -1}, {"coreSubjects": 1}):
        assert client.put("/v1/analytics/credit-categories", headers=auth_headers, json=bad).status_code == 400
    assert client.get("/v1/analytics/credit-categories", headers=auth_headers).json()["data"] == body
