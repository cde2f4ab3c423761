from dataclasses import dataclass

from pocketpet.scoring import letter_grade, score_pet


@dataclass(frozen=True)
class LifeSummary:
    name: str
    species: str
    age: int
    phase: str
    real_seconds_lived: float
    cause: str
    score: int
    grade: str
    vitals: dict


def format_duration(seconds):
    seconds = max(0, int(seconds))
    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes = rem // 60
    if days:
        return f"{days}d {hours}h {minutes:02d}m"
    return f"{hours}h {minutes:02d}m"


def lifetime_end(pet):
    """Time of death, or the last simulated time for a pet still alive."""
    if pet.died_at is not None:
        return pet.died_at
    return pet.last_simulated_at


def summarize_life(pet) -> LifeSummary:
    """End-of-life card for a pet. The score is recomputed from the final snapshot."""
    score = score_pet(pet)
    return LifeSummary(
        name=pet.name,
        species=pet.species.label,
        age=pet.age,
        phase=pet.phase.value,
        real_seconds_lived=max(0.0, lifetime_end(pet) - pet.birth_time),
        cause=pet.cause_of_death.value if pet.cause_of_death else "Unknown",
        score=score,
        grade=letter_grade(score),
        vitals={k: round(v) for k, v in pet.vitals().items()},
    )


def format_summary(summary: LifeSummary):
    lines = [
        f"{summary.name} the {summary.species}",
        f"Lifespan: {summary.age} years ({summary.phase}), {format_duration(summary.real_seconds_lived)} real time",
        f"Cause: {summary.cause}",
        f"Caretaker Score: {summary.score}",
        f"Rank: {summary.grade}",
        "Final Vitals",
    ]
    for vital, value in summary.vitals.items():
        lines.append(f"  {vital.capitalize()}: {value}/100")
    return lines
