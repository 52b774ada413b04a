import pytest
from fastapi import HTTPException

from hrportal.domains.psychometrics.repository import (
    PsychometricAttemptRepository,
    PsychometricQuestionRepository,
    PsychometricTestRepository,
)
from hrportal.domains.psychometrics.scoring import (
    RECOMMENDATIONS,
    recommendations_for,
    round_percentage,
    score_answer,
    score_attempt,
)
from hrportal.domains.psychometrics.service import PsychometricService


def question(question_id, question_type="scale", category=None, correct_answer=None):
    return {
        "_id": question_id,
        "question_type": question_type,
        "category": category,
        "correct_answer": correct_answer,
    }


class TestScoreAnswer:

    @pytest.mark.parametrize("answer, points", [("4", 4), ("5", 5), (" 3 ", 3), ("2 - disagree", 2), ("x", 0), ("", 0)])
    def test_scale(self, answer, points):
        assert score_answer(question(1, "scale"), answer) == points

    def test_yes_no(self):
        assert score_answer(question(1, "yes_no"), "yes") == 5
        assert score_answer(question(1, "yes_no"), "no") == 1
        assert score_answer(question(1, "yes_no"), "maybe") == 1

    def test_multiple_choice(self):
        q = question(1, "multiple_choice", correct_answer="B")
        assert score_answer(q, "B") == 5
        assert score_answer(q, "A") == 0

    def test_multiple_choice_without_key_scores_nothing(self):
        assert score_answer(question(1, "multiple_choice"), "B") == 0


def test_round_percentage_rounds_half_up():
    assert round_percentage(1, 8) == 13
    assert round_percentage(1, 3) == 33
    assert round_percentage(2, 3) == 67
    assert round_percentage(5, 0) == 0


@pytest.mark.parametrize("score, band", [(100, "high"), (80, "high"), (79, "medium"), (60, "medium"), (59, "low"), (0, "low")])
def test_recommendation_bands(score, band):
    assert recommendations_for("personality", score) == RECOMMENDATIONS["personality"][band]
    assert recommendations_for("cognitive", score) == RECOMMENDATIONS["cognitive"][band]


def test_no_recommendations_for_other_test_types():
    assert recommendations_for("aptitude", 90) == []


def test_score_personality_attempt():
    test = {"_id": 1, "test_type": "personality"}
    questions = [
        question(1, category="Extraversion"),
        question(2, category="Extraversion"),
        question(3, category="Openness"),
        question(4, category="Openness"),
    ]
    responses = [
        {"question_id": 1, "answer": "5"},
        {"question_id": 2, "answer": "3"},
        {"question_id": 3, "answer": "4"},
        {"question_id": 99, "answer": "5"},
    ]

    scored = score_attempt(test, questions, responses)

    assert scored["total_score"] == 12
    assert scored["percentage_score"] == 60
    assert scored["results"]["personality_traits"] == {"Extraversion": 80, "Openness": 80}
    assert scored["results"]["recommendations"] == RECOMMENDATIONS["personality"]["medium"]
    assert "cognitive_scores" not in scored["results"]


def test_score_cognitive_attempt():
    test = {"_id": 2, "test_type": "cognitive"}
    questions = [
        question(1, "multiple_choice", "Logic", correct_answer="A"),
        question(2, "multiple_choice", "Logic", correct_answer="C"),
    ]

    scored = score_attempt(test, questions, [{"question_id": 1, "answer": "A"}, {"question_id": 2, "answer": "C"}])

    assert scored["percentage_score"] == 100
    assert scored["results"]["cognitive_scores"] == {"Logic": 100}
    assert scored["results"]["recommendations"] == RECOMMENDATIONS["cognitive"]["high"]


@pytest.fixture
def service(db):
    return PsychometricService(
        PsychometricTestRepository(db["psychometric_tests"], db["counters"]),
        PsychometricQuestionRepository(db["psychometric_questions"], db["counters"]),
        PsychometricAttemptRepository(db["psychometric_test_attempts"], db["counters"]),
    )


async def add_test_with_questions(service, count=2):
    test = await service.create_test({"test_name": "Reasoning", "test_type": "cognitive"})
    for order in range(1, count + 1):
        await service.create_question({
            "test_id": test["_id"],
            "question_text": f"Question {order}",
            "question_type": "multiple_choice",
            "options": ["A", "B", "C"],
            "correct_answer": "A",
            "category": "Logic",
            "order": order,
        })
    return await service.get_test(test["_id"])


@pytest.mark.asyncio
async def test_create_question_refreshes_count(service):
    test = await add_test_with_questions(service, count=3)

    assert test["total_questions"] == 3
    questions = await service.get_questions(test["_id"])
    assert [q["order"] for q in questions] == [1, 2, 3]


@pytest.mark.asyncio
async def test_duplicate_test_name_conflicts(service):
    await service.create_test({"test_name": "Reasoning", "test_type": "cognitive"})

    with pytest.raises(HTTPException) as exc_info:
        await service.create_test({"test_name": "Reasoning", "test_type": "personality"})

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_duplicate_question_order_conflicts(service):
    test = await add_test_with_questions(service, count=1)

    with pytest.raises(HTTPException) as exc_info:
        await service.create_question({
            "test_id": test["_id"], "question_text": "Again",
            "question_type": "yes_no", "order": 1,
        })

    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_create_attempt_scores_responses(service):
    test = await add_test_with_questions(service, count=2)
    questions = await service.get_questions(test["_id"])

    attempt = await service.create_attempt({
        "candidate_email": "cand@example.com",
        "candidate_name": "Candidate",
        "test_id": test["_id"],
        "responses": [
            {"question_id": questions[0]["_id"], "answer": "A"},
            {"question_id": questions[1]["_id"], "answer": "B"},
        ],
    })

    assert attempt["status"] == "completed"
    assert attempt["completed_at"] is not None
    assert attempt["total_score"] == 5
    assert attempt["percentage_score"] == 50
    assert attempt["results"]["cognitive_scores"] == {"Logic": 50}

    stats = await service.get_dashboard_stats()
    assert stats == {"total_tests": 1, "total_attempts": 1, "completed_attempts": 1, "average_score": 50}


@pytest.mark.asyncio
async def test_stats_cover_every_completed_attempt(service, db):
    attempts = db["psychometric_test_attempts"].documents
    for index in range(20000):
        attempts.append({"_id": index + 1, "test_id": 1, "status": "completed",
                         "percentage_score": 100 if index % 2 else 0})
    attempts.append({"_id": 20001, "test_id": 1, "status": "in_progress", "percentage_score": 100})

    stats = await service.get_dashboard_stats()

    assert stats["total_attempts"] == 20001
    assert stats["completed_attempts"] == 20000
    assert stats["average_score"] == 50


@pytest.mark.asyncio
async def test_unscored_completed_attempts_average_as_zero(service, db):
    db["psychometric_test_attempts"].documents.extend([
        {"_id": 1, "test_id": 1, "status": "completed", "percentage_score": 75},
        {"_id": 2, "test_id": 1, "status": "completed"},
    ])

    stats = await service.get_dashboard_stats()

    assert stats["completed_attempts"] == 2
    assert stats["average_score"] == 38


@pytest.mark.asyncio
async def test_long_tests_load_every_question(service, db):
    test = await service.create_test({"test_name": "Marathon", "test_type": "personality"})
    db["psychometric_questions"].documents.extend(
        {"_id": 100 + order, "test_id": test["_id"], "question_text": f"Q{order}",
         "question_type": "scale", "order": order}
        for order in range(1500, 0, -1)
    )

    questions = await service.get_questions(test["_id"])

    assert len(questions) == 1500
    assert questions[0]["order"] == 1
    assert questions[-1]["order"] == 1500


@pytest.mark.asyncio
async def test_attempt_on_empty_test_is_stored_unscored(service):
    test = await service.create_test({"test_name": "Empty", "test_type": "personality"})

    attempt = await service.create_attempt({
        "candidate_email": "cand@example.com", "candidate_name": "Candidate",
        "test_id": test["_id"], "responses": [],
    })

    assert attempt.get("total_score") is None


@pytest.mark.asyncio
async def test_attempt_for_unknown_test_is_404(service):
    with pytest.raises(HTTPException) as exc_info:
        await service.create_attempt({"test_id": 7, "responses": []})

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_test_removes_questions(service, db):
    test = await add_test_with_questions(service, count=2)

    assert await service.delete_test(test["_id"])
    assert db["psychometric_questions"].documents == []
    with pytest.raises(HTTPException):
        await service.get_test(test["_id"])


@pytest.mark.asyncio
async def test_export_attaches_questions(service):
    await add_test_with_questions(service, count=2)

    exported = await service.export_tests()

    assert len(exported) == 1
    assert [q["order"] for q in exported[0]["questions"]] == [1, 2]
