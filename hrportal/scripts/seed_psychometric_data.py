#!/usr/bin/env python3
# hrportal/scripts/seed_psychometric_data.py
"""
Seed the Big Five personality assessment and its questions.

Re-running is safe: the test is matched by name and each question by its
test and position, so nothing is inserted twice.
"""
import asyncio
import logging
import sys
from typing import Dict

from hrportal.core.config import settings
from hrportal.db.indexes import ensure_indexes
from hrportal.domains.psychometrics.repository import PsychometricQuestionRepository, PsychometricTestRepository

logger = logging.getLogger(__name__)

BIG_FIVE_TEST = {
    "test_name": "Big Five Personality Assessment",
    "test_type": "personality",
    "description": "A comprehensive personality assessment based on the Big Five personality traits model.",
    "instructions": "Please answer each question honestly based on how you generally feel and behave. "
                    "There are no right or wrong answers.",
    "time_limit": 30,
    "is_active": True,
}

BIG_FIVE_QUESTIONS = [
    ("I am the life of the party.", "Extraversion"),
    ("I feel little concern for others.", "Agreeableness"),
    ("I am always prepared.", "Conscientiousness"),
    ("I get stressed out easily.", "Neuroticism"),
    ("I have a rich vocabulary.", "Openness"),
    ("I don't talk a lot.", "Extraversion"),
    ("I am interested in people.", "Agreeableness"),
    ("I leave my belongings around.", "Conscientiousness"),
    ("I am relaxed most of the time.", "Neuroticism"),
    ("I have difficulty understanding abstract ideas.", "Openness"),
    ("I feel comfortable around people.", "Extraversion"),
    ("I insult people.", "Agreeableness"),
    ("I pay attention to details.", "Conscientiousness"),
    ("I worry about things.", "Neuroticism"),
    ("I have a vivid imagination.", "Openness"),
    ("I keep in the background.", "Extraversion"),
    ("I sympathize with others' feelings.", "Agreeableness"),
    ("I make a mess of things.", "Conscientiousness"),
    ("I seldom feel blue.", "Neuroticism"),
    ("I am not interested in abstract ideas.", "Openness"),
]

SCALE_OPTIONS = ["1", "2", "3", "4", "5"]


async def seed_psychometric_data(test_repo: PsychometricTestRepository,
                                 question_repo: PsychometricQuestionRepository) -> Dict[str, int]:
    """
    Insert the sample test and whichever of its questions are missing.

    Args:
        test_repo: Repository for tests
        question_repo: Repository for questions

    Returns:
        Test id plus counts of inserted and skipped questions
    """
    test, test_created = await test_repo.insert_if_absent(
        {"test_name": BIG_FIVE_TEST["test_name"]},
        {**BIG_FIVE_TEST, "total_questions": len(BIG_FIVE_QUESTIONS)}
    )
    test_id = test["_id"]
    if not test_created:
        logger.info(f"Test '{BIG_FIVE_TEST['test_name']}' already exists with ID {test_id}")

    created = skipped = 0
    for order, (text, category) in enumerate(BIG_FIVE_QUESTIONS, start=1):
        question = {
            "test_id": test_id,
            "question_text": text,
            "question_type": "scale",
            "options": SCALE_OPTIONS,
            "category": category,
            "order": order,
        }
        _, inserted = await question_repo.insert_if_absent({"test_id": test_id, "order": order}, question)
        if inserted:
            created += 1
        else:
            skipped += 1

    total = await question_repo.count_for_test(test_id)
    await test_repo.update(test_id, {"total_questions": total})

    return {"test_id": test_id, "questions_created": created, "questions_skipped": skipped}


async def main() -> int:
    """Seed psychometric data; returns the process exit code."""
    try:
        logger.info("Creating sample psychometric test...")
        await ensure_indexes()

        result = await seed_psychometric_data(PsychometricTestRepository(), PsychometricQuestionRepository())

        logger.info("Successfully seeded psychometric test data")
        logger.info(f"  - Test ID: {result['test_id']}")
        logger.info(f"  - Questions created: {result['questions_created']} (skipped {result['questions_skipped']})")
        return 0
    except Exception as e:
        logger.error(f"Error seeding psychometric data: {str(e)}", exc_info=True)
        return 1


def run():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
