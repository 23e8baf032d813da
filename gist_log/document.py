"""
Markdown merging for the daily log document.

The document has a "## Index" block listing every logged date as a link,
newest first, and one "## YYYY-MM-DD" section per day. A region runs from
its heading up to the next "##" heading or the end of the text.
"""
import re

from .prompts import AnswerSet

INDEX_HEADING = "## Index"
INDENT = "    "

LIST_LABELS = [
    ("what_i_did", "1. What I did:"),
    ("whats_next", "2. What's next:"),
    ("what_block", "3. What Block:"),
]
SCORE_LABEL = "4. Productivity Score (1-5):"

INDEX_PATTERN = re.compile(r"## Index([\s\S]*?)(?=##|\Z)")
INDEX_SPACING_PATTERN = re.compile(r"(## Index[\s\S]*?)(?=\n## |\Z)")
INDEX_DATE_PATTERN = re.compile(r"\[(\d{4}-\d{2}-\d{2})\]")


def section_pattern(date: str):
    return re.compile(rf"## {re.escape(date)}([\s\S]*?)(?=## |\Z)")


def index_dates(content: str) -> list:
    match = INDEX_PATTERN.search(content)
    if not match:
        return []
    return INDEX_DATE_PATTERN.findall(match.group(1))


def render_index(dates) -> str:
    return INDEX_HEADING + "\n" + "\n".join(f"[{d}](#{d})" for d in dates) + "\n"


def _pad_index(match) -> str:
    block = match.group(0)
    return block if block.endswith("\n\n") else block + "\n"


def update_index(content: str, date: str) -> str:
    """Add ``date`` to the index block and keep it sorted newest first.

    Documents without an index block are returned untouched; the index is
    never created here.
    """
    dates = index_dates(content)
    if date not in dates:
        dates.append(date)
    dates.sort(reverse=True)
    new_index = render_index(dates)
    content = INDEX_PATTERN.sub(lambda m: new_index, content, count=1)
    return INDEX_SPACING_PATTERN.sub(_pad_index, content, count=1)


def render_section(date: str, answers: AnswerSet) -> str:
    lines = [f"## {date}"]
    for field, label in LIST_LABELS:
        lines.append(label)
        lines.extend(f"{INDENT}- {point}" for point in getattr(answers, field))
    lines.append(f"{SCORE_LABEL} {answers.productivity_score}")
    return "\n".join(lines) + "\n"


def extract_section(content: str, date: str):
    match = section_pattern(date).search(content)
    return match.group(0) if match else None


def has_section(content: str, date: str) -> bool:
    return extract_section(content, date) is not None


def upsert_section(content: str, date: str, answers: AnswerSet) -> str:
    section = render_section(date, answers)
    pattern = section_pattern(date)
    if pattern.search(content):
        return pattern.sub(lambda m: section, content, count=1)
    return content + "\n" + section


def parse_section(section: str) -> AnswerSet:
    """Read the answers back out of a rendered date section."""
    labels = dict((label, field) for field, label in LIST_LABELS)
    groups = {field: [] for field, _ in LIST_LABELS}
    score = None
    current = None
    bullet = INDENT + "- "
    for line in section.splitlines():
        if line in labels:
            current = labels[line]
        elif line.startswith(SCORE_LABEL):
            score = line[len(SCORE_LABEL):].strip()
            current = None
        elif current and line.startswith(bullet):
            groups[current].append(line[len(bullet):])
    return AnswerSet(productivity_score=score, **groups)


def merge_entry(content: str, date: str, answers: AnswerSet) -> str:
    content = update_index(content, date)
    return upsert_section(content, date, answers)
