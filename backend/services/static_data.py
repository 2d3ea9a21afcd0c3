"""
Fixed reference tables served alongside the survey data.
"""
from typing import List

from models.survey import ProjectTime, SkillLevel

SKILLS = (
    ("Programmazione", 90),
    ("Elettronica", 85),
    ("Design", 75),
    ("Networking", 80),
    ("Sicurezza", 70),
)

TIME_PER_PROJECT = (
    ("ESP3D BOX", 120),
    ("Simocoloweb", 80),
    ("Flipper Zero", 60),
    ("Bruce", 40),
    ("Website", 100),
)


def get_skills() -> List[SkillLevel]:
    return [SkillLevel(skill=skill, level=level) for skill, level in SKILLS]


def get_time_per_project() -> List[ProjectTime]:
    return [ProjectTime(project=project, hours=hours) for project, hours in TIME_PER_PROJECT]
