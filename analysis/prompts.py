"""
Prompt templates for compatibility scoring and team role assignment.

Both builders are pure: identical inputs render byte-identical prompts.
"""
from typing import Iterable, List, Sequence, Tuple

ROLE_VOCABULARY: Tuple[str, ...] = (
    "Frontend Developer",
    "Backend Developer",
    "Full-stack Developer",
    "Designer",
    "QA",
)

COMPATIBILITY_INTRO = (
    "You are an expert analyst. Evaluate how well the applicant fits the project "
    "based on the following information.\n\n"
)

COMPATIBILITY_INSTRUCTIONS = (
    "Rate the applicant's fit for this project from 0 to 100 with two decimal places, "
    "and briefly explain why.\n"
    "Format: score|reason (e.g. 75.50|Strong React, weak backend)"
)

ROLE_ASSIGNMENT_INSTRUCTIONS = (
    "Assign the most suitable role to each applicant. "
    "Choose roles from: {roles}.\n"
    "Format: one line per applicant, applicant name - role "
    "(e.g. Jane Doe - {example_role})\n"
)


def _skill_lines(skills: Iterable) -> List[str]:
    return [f"- {skill.tech_name}: {skill.score}/10\n" for skill in skills]


def build_compatibility_prompt(application, project, skills: Sequence) -> str:
    """
    Render the scoring prompt for one application.

    Skills are rendered in the order given, duplicates included. The
    application itself contributes nothing beyond its skills today; it is
    accepted so callers pass the full scoring context.
    """
    parts = [
        COMPATIBILITY_INTRO,
        f"Project: {project.description}\n",
        f"Team size: {project.team_size} members\n",
        f"Project duration: {project.duration_weeks} weeks\n",
        "Applicant skills:\n",
    ]
    parts.extend(_skill_lines(skills))
    parts.append(COMPATIBILITY_INSTRUCTIONS)
    return "".join(parts)


def build_role_assignment_prompt(project, roster: Sequence[Tuple[str, Sequence]]) -> str:
    """
    Render the role assignment prompt for an approved roster.

    Args:
        project: Project being staffed.
        roster: ``(applicant_name, skills)`` pairs in roster order.
    """
    parts = [
        f"Project: {project.description}\n",
        f"Team size: {project.team_size} members\n",
    ]
    for name, skills in roster:
        parts.append(f"Applicant: {name}\n")
        parts.extend(_skill_lines(skills))
        parts.append("\n")
    parts.append(
        ROLE_ASSIGNMENT_INSTRUCTIONS.format(
            roles=", ".join(f"'{role}'" for role in ROLE_VOCABULARY),
            example_role=ROLE_VOCABULARY[0],
        )
    )
    return "".join(parts)
