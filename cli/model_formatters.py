# cli/model_formatters.py

# anything that renders domain objects or performs Roster read-only operations
from textwrap import dedent

import core.formatters as formatters
from core.config import RecordsConfig
from models.statistics import overall_average, roster_average
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    average = formatters.format_average(overall_average(student))

    return f"{student.id:<10} | {student.name:<20} | {formatters.format_level(student.form):<6} | {average:>7}"


def format_student_multiline(student: Student) -> str:
    average = formatters.format_average(overall_average(student))

    return dedent(
        f"""\
        ... ID: {student.id}
        ... Name: {student.name}
        ... Gender: {student.gender}
        ... Age: {student.age}
        ... Current Level: {formatters.format_level(student.form)}
        ... Overall Average: {average}"""
    )


# === performance formatters ===


def format_performance_table(student: Student, config: RecordsConfig) -> str:
    records = student.performance_records

    if not records:
        return "No results recorded yet."

    header = ["Form", *(subject.label for subject in config.subjects), "Avg"]
    lines = [" | ".join(f"{column:>9}" for column in header)]

    for record in records:
        scores = [
            formatters.format_score(score)
            for score in (record.score_for(subject) for subject in config.subjects)
            if score is not None
        ]
        row = [
            formatters.format_level(record.form),
            *scores,
            formatters.format_average(record.average),
        ]
        lines.append(" | ".join(f"{column:>9}" for column in row))

    return "\n".join(lines)


def format_student_details(student: Student, config: RecordsConfig) -> str:
    banner = formatters.format_banner_text("Academic Record")

    return (
        f"{format_student_multiline(student)}\n\n"
        f"{banner}\n"
        f"{format_performance_table(student, config)}"
    )


# === roster formatters ===


def format_roster_summary(students: list[Student]) -> str:
    count = len(students)
    noun = "student" if count == 1 else "students"
    average = formatters.format_average(roster_average(students))

    return f"{count} {noun} | class average: {average}"
