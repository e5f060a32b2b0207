# core/formatters.py

# all pure text helpers
# must never import from models!

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return str(items[0])

    if len(items) == 2:
        return " and ".join(str(item) for item in items)

    return ", ".join(str(item) for item in items[:-1]) + ", and " + str(items[-1])


# === score formatters ===


def format_average(average: float | None) -> str:
    return "N/A" if average is None else f"{average:.2f}%"


def format_score(score: float) -> str:
    # whole-number scores print without a trailing ".0"
    return f"{score:g}"


def format_level(level: int) -> str:
    return f"Form {level}"
