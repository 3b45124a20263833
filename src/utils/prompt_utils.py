import os, toml
from typing import Dict

from utils.constants import find_difficulty, find_subject


def load_prompts():
    prompts_file = os.path.join(os.path.dirname(__file__), "../config/prompts.toml")
    with open(prompts_file, "r") as f:
        data = toml.load(f)
    return data


def prompt_variables(subject_id: str, difficulty_id: str) -> Dict[str, str]:
    subject = find_subject(subject_id)
    difficulty = find_difficulty(difficulty_id)
    if not subject:
        raise ValueError(f"Unknown subject: {subject_id}")
    if not difficulty:
        raise ValueError(f"Unknown difficulty: {difficulty_id}")
    return {
        "subject_label": subject["label"],
        "strategy": subject["strategy"],
        "difficulty_label": difficulty["label"],
        "ages": difficulty["ages"],
    }
