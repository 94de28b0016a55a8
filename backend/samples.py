# Pre-written tasks for trying the analyzer, grouped by the category they are expected to land in
from typing import Optional

from models import TaskCategory

SAMPLE_TASKS: dict[TaskCategory, list[str]] = {
    TaskCategory.WORK: [
        "Fix bug in authentication module - urgent",
        "Review Sarah pull request by end of day",
        "Prepare presentation for client meeting next Tuesday",
        "Update API documentation",
        "Schedule team standup for tomorrow morning",
    ],
    TaskCategory.PERSONAL: [
        "Call mom this weekend",
        "Buy groceries for dinner party on Saturday",
        "Return library books",
        "Plan summer vacation",
    ],
    TaskCategory.HEALTH: [
        "Schedule dentist appointment for next Friday",
        "Go for a run tomorrow morning",
        "Refill prescription before it runs out",
        "Book annual physical exam",
    ],
    TaskCategory.FINANCE: [
        "Pay electricity bill before the 15th",
        "Review quarterly investment portfolio",
        "File expense report from last week trip",
        "Set up retirement contributions by end of summer",
    ],
    TaskCategory.OTHER: [
        "URGENT!!!",
        "Think about stuff",
        "Organize everything before the start of winter",
    ],
}


def get_sample_tasks(category: Optional[TaskCategory] = None) -> list[dict]:
    """Sample tasks as {"category", "task"} records, optionally for one category."""
    categories = [category] if category else list(TaskCategory)
    return [
        {"category": c.value, "task": task}
        for c in categories
        for task in SAMPLE_TASKS[c]
    ]
