"""
Scoring rules for psychometric test attempts.

Every question is worth at most MAX_POINTS_PER_QUESTION. Percentages are
rounded half up to whole numbers.
"""
import math
from typing import Any, Dict, Iterable, List, Mapping

MAX_POINTS_PER_QUESTION = 5

RECOMMENDATIONS: Dict[str, Dict[str, List[str]]] = {
    "personality": {
        "high": [
            "Excellent personality fit for the role with strong interpersonal skills.",
            "Consider for leadership development opportunities.",
        ],
        "medium": [
            "Good personality match with potential for growth.",
            "Recommend mentoring and skill development programs.",
        ],
        "low": [
            "Consider additional personality development training.",
            "May benefit from team-based collaboration exercises.",
        ],
    },
    "cognitive": {
        "high": [
            "Strong cognitive abilities suitable for complex problem-solving roles.",
            "Consider for analytical and strategic positions.",
        ],
        "medium": [
            "Good cognitive performance with room for improvement.",
            "Recommend continued learning and development opportunities.",
        ],
        "low": [
            "May benefit from additional training in analytical thinking.",
            "Consider roles that leverage existing strengths.",
        ],
    },
}


def round_percentage(numerator: float, denominator: float) -> int:
    if not denominator:
        return 0
    return int(math.floor(numerator / denominator * 100 + 0.5))


def _leading_int(answer: Any) -> int:
    text = str(answer).strip()
    digits = ""
    for index, char in enumerate(text):
        if char.isdigit() or (index == 0 and char in "+-"):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return 0


def score_answer(question: Mapping[str, Any], answer: Any) -> int:
    """
    Points earned by one answer.

    Args:
        question: Question document with question_type and correct_answer
        answer: Candidate's raw answer

    Returns:
        Points for the answer
    """
    question_type = question.get("question_type")

    if question_type == "scale":
        return _leading_int(answer)
    if question_type == "yes_no":
        return MAX_POINTS_PER_QUESTION if answer == "yes" else 1
    if question_type == "multiple_choice" and question.get("correct_answer"):
        return MAX_POINTS_PER_QUESTION if answer == question["correct_answer"] else 0
    return 0


def recommendations_for(test_type: str, percentage_score: int) -> List[str]:
    bands = RECOMMENDATIONS.get(test_type)
    if not bands:
        return []
    if percentage_score >= 80:
        return list(bands["high"])
    if percentage_score >= 60:
        return list(bands["medium"])
    return list(bands["low"])


def score_attempt(test: Mapping[str, Any],
                  questions: List[Mapping[str, Any]],
                  responses: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Score a set of responses against a test's questions.

    Responses to unknown questions are ignored. The maximum score counts
    every question of the test, answered or not.

    Args:
        test: Test document with test_type
        questions: Questions of the test, keyed by _id
        responses: Items with question_id and answer

    Returns:
        Dict with total_score, percentage_score and results
    """
    by_id = {question["_id"]: question for question in questions}
    total_score = 0
    categories: Dict[str, Dict[str, int]] = {}

    for response in responses:
        question = by_id.get(response.get("question_id"))
        if question is None:
            continue

        points = score_answer(question, response.get("answer"))
        total_score += points

        category = question.get("category")
        if category:
            bucket = categories.setdefault(category, {"total": 0, "count": 0})
            bucket["total"] += points
            bucket["count"] += 1

    percentage_score = round_percentage(total_score, len(questions) * MAX_POINTS_PER_QUESTION)

    category_percentages = {
        category: round_percentage(bucket["total"], bucket["count"] * MAX_POINTS_PER_QUESTION)
        for category, bucket in categories.items()
    }

    results: Dict[str, Any] = {}
    test_type = test.get("test_type")
    if test_type == "personality":
        results["personality_traits"] = category_percentages
    elif test_type == "cognitive":
        results["cognitive_scores"] = category_percentages
    results["recommendations"] = recommendations_for(test_type, percentage_score)

    return {
        "total_score": total_score,
        "percentage_score": percentage_score,
        "results": results,
    }
