import calendar
import json
from datetime import date, datetime, timedelta
from typing import NamedTuple, Optional, Union

from models import TaskCategory, TaskPriority, TaskResponse

# System prompt for task categorization
# Categories: Work, Personal, Health, Finance, Other
# Priorities: High, Medium, Low
# Due dates: ISO format YYYY-MM-DD, resolved against {today}
SYSTEM_PROMPT = """You are a task categorization assistant. Your job is to analyze tasks and return structured JSON responses.

# Categories

Categorize tasks into one of these five categories:

- **Work**: Professional tasks, coding, bug fixes, meetings, documentation, presentations, team activities
- **Personal**: Social activities, errands, hobbies, personal calls, shopping, entertainment
- **Health**: Medical appointments, exercise, medication, wellness, nutrition, sleep
- **Finance**: Bills, budgeting, investments, taxes, expense reports, payments
- **Other**: Ambiguous, uncategorizable, or multi-category tasks

# Priority Levels

Determine priority based on urgency signals:

- **High**: Explicit urgency markers ("urgent", "ASAP", "emergency", "critical") or an imminent deadline
- **Medium**: Has a deadline or is important, but is not urgent
- **Low**: No deadline pressure, routine tasks, nice-to-have or long-term goals

# Due Date Extraction

Parse natural language dates and return ISO format (YYYY-MM-DD) or null if no date is mentioned.

- Today's reference date: {today}
- Resolve every relative date against the reference date:
  - "today" -> {today}
  - "tomorrow" -> reference date + 1 day ({tomorrow})
  - "next Friday" -> the soonest Friday after today, never today itself, even if today is a Friday
  - "this weekend" -> the coming Saturday
- Parse specific dates: "April 15th", "March 22nd", "December 1st"
- Date preposition rules:
  - "before the 15th" -> the 14th (day prior, exclusive deadline)
  - "by the 15th" -> the 15th (inclusive deadline)
  - "on the 15th" -> the 15th (exact date)
- Day-of-month references ("the 15th") mean this month's day; if the month is too short, use its last day ("the 31st" in April -> April 30); if that day has already passed, use next month's
- Return null if no date is mentioned or the date is too vague

# Seasonal Dates

Seasons follow astronomical seasons (equinoxes and solstices), not calendar quarters.
Resolve a seasonal phrase to its next occurrence on or after the reference date:

{season_rules}

# Response Format

Return ONLY a single valid JSON object in this exact format (no markdown, no code fences, no explanations before or after):
{{
  "category": "Work" | "Personal" | "Health" | "Finance" | "Other",
  "priority": "High" | "Medium" | "Low",
  "reasoning": "Brief explanation in 1-2 sentences",
  "due_date": "YYYY-MM-DD" | null
}}

# Examples

{examples}"""


class SeasonalAnchor(NamedTuple):
    phrases: tuple[str, ...]
    month: int
    day: int
    boundary: str


# Astronomical season boundaries: each season ends the day before the next begins,
# except winter, which starts on the solstice that ends fall
SEASONAL_ANCHORS = [
    SeasonalAnchor(("end of spring",), 6, 20, "day before the June solstice"),
    SeasonalAnchor(("end of summer",), 9, 22, "day before the September equinox"),
    SeasonalAnchor(("end of fall", "end of autumn"), 12, 21, "December solstice"),
    SeasonalAnchor(("end of winter",), 3, 19, "day before the March equinox"),
    SeasonalAnchor(("start of spring",), 3, 20, "March equinox"),
    SeasonalAnchor(("start of summer",), 6, 21, "June solstice"),
    SeasonalAnchor(("start of fall", "start of autumn"), 9, 23, "September equinox"),
    SeasonalAnchor(("start of winter",), 12, 21, "December solstice"),
]


class FewShotExample(NamedTuple):
    task: str
    response: TaskResponse


DateLike = Union[date, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def to_local_date_string(value: DateLike) -> str:
    """Format a date as YYYY-MM-DD."""
    return _as_date(value).strftime("%Y-%m-%d")


def local_today() -> date:
    # Local time, not UTC: in the evening of a UTC-negative zone the UTC date
    # is already tomorrow, which would shift every relative date by one day
    return datetime.now().date()


def seasonal_date(today: DateLike, month: int, day: int) -> str:
    """
    Resolve a fixed (month, day) anchor to its next occurrence.
    Uses this year's date unless it is strictly before today, then next year's.
    """
    reference = _as_date(today)
    target = date(reference.year, month, day)
    if target < reference:
        target = date(reference.year + 1, month, day)
    return to_local_date_string(target)


def next_weekday(today: DateLike, weekday: int) -> str:
    """
    Next occurrence of weekday (Monday=0 ... Sunday=6) strictly after today.
    When today already is that weekday, the result is one week later.
    """
    reference = _as_date(today)
    days_ahead = (weekday - reference.weekday()) % 7 or 7
    return to_local_date_string(reference + timedelta(days=days_ahead))


def this_month_date(today: DateLike, day_of_month: int) -> str:
    """
    Resolve "the Nth" against today.

    The day is clamped to the length of the month ("the 31st" in April is
    April 30). If the resulting date is already past, the same day of the
    following month is used instead, clamped again. A date equal to today is
    not past.
    """
    if not 1 <= day_of_month <= 31:
        raise ValueError(f"day_of_month must be between 1 and 31, got {day_of_month}")

    reference = _as_date(today)
    year, month = reference.year, reference.month
    target = _clamped_date(year, month, day_of_month)
    if target < reference:
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1
        target = _clamped_date(year, month, day_of_month)
    return to_local_date_string(target)


def _clamped_date(year: int, month: int, day: int) -> date:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def few_shot_examples(today: DateLike) -> list[FewShotExample]:
    """Worked examples with their due dates computed for the reference date."""
    return [
        FewShotExample(
            "Fix bug in authentication module - urgent",
            TaskResponse(
                category=TaskCategory.WORK,
                priority=TaskPriority.HIGH,
                reasoning="Technical work task with explicit urgency indicator",
                due_date=None,
            ),
        ),
        FewShotExample(
            "Call mom this weekend",
            TaskResponse(
                category=TaskCategory.PERSONAL,
                priority=TaskPriority.MEDIUM,
                reasoning="Personal activity with weekend timeframe",
                due_date=next_weekday(today, calendar.SATURDAY),
            ),
        ),
        FewShotExample(
            "Schedule dentist appointment for next Friday",
            TaskResponse(
                category=TaskCategory.HEALTH,
                priority=TaskPriority.MEDIUM,
                reasoning="Medical appointment with specific date",
                due_date=next_weekday(today, calendar.FRIDAY),
            ),
        ),
        FewShotExample(
            "Pay electricity bill before the 15th",
            TaskResponse(
                category=TaskCategory.FINANCE,
                priority=TaskPriority.HIGH,
                reasoning="Bill payment with deadline approaching - 'before the 15th' means the 14th",
                due_date=this_month_date(today, 14),
            ),
        ),
        FewShotExample(
            "Submit quarterly grant report by end of summer",
            TaskResponse(
                category=TaskCategory.WORK,
                priority=TaskPriority.MEDIUM,
                reasoning="Work deliverable with a seasonal deadline - end of summer is September 22",
                due_date=seasonal_date(today, 9, 22),
            ),
        ),
        FewShotExample(
            "URGENT!!!",
            TaskResponse(
                category=TaskCategory.OTHER,
                priority=TaskPriority.HIGH,
                reasoning="Ambiguous task with urgency marker but no clear context",
                due_date=None,
            ),
        ),
    ]


def _format_season_rules(today: DateLike) -> str:
    lines = []
    for anchor in SEASONAL_ANCHORS:
        phrases = " / ".join(f'"{phrase}"' for phrase in anchor.phrases)
        month_name = calendar.month_name[anchor.month]
        resolved = seasonal_date(today, anchor.month, anchor.day)
        lines.append(
            f"- {phrases} -> {month_name} {anchor.day} ({anchor.boundary}); next occurrence: {resolved}"
        )
    return "\n".join(lines)


def _format_examples(examples: list[FewShotExample]) -> str:
    blocks = []
    for example in examples:
        response = json.dumps(example.response.model_dump(mode="json"))
        blocks.append(f'Task: "{example.task}"\nResponse: {response}')
    return "\n\n".join(blocks)


def build_system_prompt(today: Optional[DateLike] = None) -> str:
    """Build the system prompt for a reference date (defaults to the local date)."""
    today = local_today() if today is None else _as_date(today)
    return SYSTEM_PROMPT.format(
        today=to_local_date_string(today),
        tomorrow=to_local_date_string(today + timedelta(days=1)),
        season_rules=_format_season_rules(today),
        examples=_format_examples(few_shot_examples(today)),
    )
