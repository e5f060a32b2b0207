# tests/helpers.py

"""
Raw-input builders shared by the test modules.
"""


def make_fields(**overrides):
    fields = {
        "id": "a1",
        "name": "Amina Njeri",
        "gender": "Female",
        "age": "15",
        "form": "1",
    }
    fields.update(overrides)
    return fields


def science_scores(math=80, physics=60, chemistry=70, biology=90):
    return {
        "math": math,
        "physics": physics,
        "chemistry": chemistry,
        "biology": biology,
    }
