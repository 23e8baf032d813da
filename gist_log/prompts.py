"""
Interactive prompts for one day's log entry.

The first three questions collect bullet points until an empty line is
entered; the last one asks for a productivity score from 1 to 5.
"""
from collections import namedtuple

AnswerSet = namedtuple("AnswerSet", ["what_i_did", "whats_next", "what_block", "productivity_score"])

QUESTIONS = [
    ("what_i_did", "1. What I did:"),
    ("whats_next", "2. What's next:"),
    ("what_block", "3. What Block:"),
    ("productivity_score", "4. Productivity Score (1-5):"),
]

VALID_SCORES = ("1", "2", "3", "4", "5")


def point_label(count: int) -> str:
    if count == 0:
        return "1: "
    return f"{count + 1}(⏎ to finish): "


def multi_point_prompt(message: str, ask=input, say=print) -> list:
    """Ask for points until an empty line, requiring at least one."""
    say(message)
    points = []
    while True:
        point = ask(point_label(len(points))).strip()
        if point:
            points.append(point)
        elif points:
            return points
        else:
            say("At least one point required.")


def score_prompt(message: str, ask=input, say=print) -> str:
    while True:
        score = ask(f"{message} ")
        if score in VALID_SCORES:
            return score
        say("Enter a number 1-5")


def collect_answers(ask=input, say=print) -> AnswerSet:
    answers = {}
    for field, message in QUESTIONS:
        if field == "productivity_score":
            answers[field] = score_prompt(message, ask, say)
        else:
            answers[field] = multi_point_prompt(message, ask, say)
    return AnswerSet(**answers)
