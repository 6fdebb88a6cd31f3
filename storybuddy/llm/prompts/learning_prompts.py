"""
Learning Prompts - Instruction templates for each learning activity.

This module contains one template per endpoint:
1. Story - short story for a given age and topic
2. Quiz - multiple-choice questions about a story, as strict JSON
3. Words - a child's daily routine in their own words
4. Translate - kid-friendly translation (Telugu by default)
5. Math - practice problems for one operation, as a strict JSON array

Caller fields are interpolated as-is after boundary validation.
"""

DEFAULT_TARGET_LANGUAGE = "Telugu"

QUIZ_QUESTION_COUNT = 5
QUIZ_OPTION_COUNT = 4
MATH_PROBLEM_COUNT = 5


def get_story_prompt(age: int, topic: str) -> str:
    """
    Get the prompt for story generation.

    Args:
        age: Child's age in years
        topic: What the story is about

    Returns:
        Complete prompt for the LLM
    """
    return (
        f"Write a short fun English story (max 250 words) for a {age}-year-old child "
        f"about {topic}. Use simple words for Indian kids, use Indian names. "
        f"Divide the story into paragraphs, do not use * inside the story."
    )


def get_quiz_prompt(story: str) -> str:
    """
    Get the prompt for quiz generation from a story.

    Args:
        story: Story text the questions are about

    Returns:
        Complete prompt for the LLM
    """
    return f"""Based on this story:
"{story}"

Create {QUIZ_QUESTION_COUNT} multiple-choice quiz questions for kids.
Each question must have exactly {QUIZ_OPTION_COUNT} options (A, B, C, D).
Clearly mark the correct answer.

Format the output as strict JSON like this:
{{
  "questions": [
    {{
      "question": "Question text?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "answer": "Correct Option"
    }}
  ]
}}
"""


def get_words_prompt(age: int) -> str:
    """
    Get the prompt for the daily-routine description.

    Args:
        age: Child's age in years

    Returns:
        Complete prompt for the LLM
    """
    return (
        f"Pretend you are a {age}-year-old Indian child. Describe your daily routine "
        f"in your own words (max 200 words), step by step, from morning to night. "
        f"Use Indian food, use games like cricket and football, and playing with toys, "
        f"not old games like gilli danda. Assume a modern city family. Do not use *."
    )


def get_translate_prompt(text: str, target_language: str = DEFAULT_TARGET_LANGUAGE) -> str:
    """
    Get the prompt for translation.

    Args:
        text: Text to translate
        target_language: Language to translate into

    Returns:
        Complete prompt for the LLM
    """
    return (
        f"Translate the following text into {target_language}.\n"
        f"Keep meaning same and use simple words for kids:\n\n{text}"
    )


def get_math_prompt(age: int, operation: str) -> str:
    """
    Get the prompt for math problem generation.

    Args:
        age: Child's age in years
        operation: Operation name, e.g. 'addition'

    Returns:
        Complete prompt for the LLM
    """
    return f"""Generate {MATH_PROBLEM_COUNT} {operation} math problems for a {age}-year-old child.
Use only {operation} type problems.
Return ONLY a valid JSON array in this format:
[
  {{"question": "5 + 3 =", "answer": 8}},
  {{"question": "10 + 2 =", "answer": 12}}
]
No text, no markdown, just JSON.
"""
