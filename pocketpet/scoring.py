"""Caretaker score (0-100).

Five weighted subscores: mood, inverted hunger, health, fitness and
attention. Fitness and attention are read off piecewise-linear curves of the
share of the pet's whole lifespan spent exercising / whining unresolved, so
the score stays fair when life expectancy changes.

1 pet year == 1 game day == 1440 game minutes.
"""
import math
from dataclasses import dataclass

from pocketpet.constants import MINUTES_PER_DAY, SPECIAL_SCORE


@dataclass(frozen=True)
class ScoreConfig:
    minutes_per_year: int = MINUTES_PER_DAY

    # Weighted average, must sum to 1.0
    weight_mood: float = 0.25
    weight_hunger_inverted: float = 0.25
    weight_health: float = 0.20
    weight_fitness: float = 0.15
    weight_attention: float = 0.15

    # Fitness: 2% of life exercising => 60, 8% => 100
    fitness_ratio_pass: float = 0.02
    fitness_ratio_excellent: float = 0.08

    # Attention: 0.5% of life whining => 100, 5% => 60, 15% => 0
    attention_ratio_excellent: float = 0.005
    attention_ratio_pass: float = 0.05
    attention_ratio_fail: float = 0.15


DEFAULT_SCORE_CONFIG = ScoreConfig()


@dataclass(frozen=True)
class ScoreBreakdown:
    score: int
    hunger_inverted: float
    fitness: float
    attention: float


def _round_half_up(value):
    return math.floor(value + 0.5)


def _clamp(value, low, high):
    return min(high, max(low, value))


def _clamp100(value):
    """Clamp to [0, 100]; NaN and infinities count as 0."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return _clamp(value, 0.0, 100.0)


def _life_ratio(minutes, total_life_minutes):
    return _clamp(minutes / total_life_minutes, 0.0, 1.0)


def fitness_score(fitness_minutes, total_life_minutes, config=DEFAULT_SCORE_CONFIG):
    if total_life_minutes <= 0 or not math.isfinite(fitness_minutes):
        return 0
    ratio = _life_ratio(fitness_minutes, total_life_minutes)
    passing = config.fitness_ratio_pass
    excellent = config.fitness_ratio_excellent

    if ratio <= 0:
        return 0
    if ratio >= excellent:
        return 100
    if ratio <= passing:
        return _round_half_up(60 * ratio / passing)
    t = (ratio - passing) / (excellent - passing)
    return _round_half_up(60 + 40 * t)


def attention_score(distress_minutes, total_life_minutes, config=DEFAULT_SCORE_CONFIG):
    """Lower share of life spent in distress is better."""
    if total_life_minutes <= 0 or not math.isfinite(distress_minutes):
        return 0
    ratio = _life_ratio(distress_minutes, total_life_minutes)
    excellent = config.attention_ratio_excellent
    passing = config.attention_ratio_pass
    fail = config.attention_ratio_fail

    if ratio <= excellent:
        return 100
    if ratio >= fail:
        return 0
    if ratio <= passing:
        t = (ratio - excellent) / (passing - excellent)
        return _round_half_up(100 - 40 * t)
    t = (ratio - passing) / (fail - passing)
    return _round_half_up(60 * (1 - t))


def compute_caretaker_score(mood, hunger, health, fitness_minutes, distress_minutes,
                            life_expectancy, config=DEFAULT_SCORE_CONFIG) -> ScoreBreakdown:
    mood = _clamp100(mood)
    health = _clamp100(health)
    hunger_inverted = _clamp100(100 - _clamp100(hunger))

    try:
        years = max(0.0, float(life_expectancy))
    except (TypeError, ValueError):
        years = 0.0
    if not math.isfinite(years):
        years = 0.0
    total_life_minutes = years * config.minutes_per_year

    try:
        fitness_minutes = float(fitness_minutes)
    except (TypeError, ValueError):
        fitness_minutes = math.nan
    try:
        distress_minutes = float(distress_minutes)
    except (TypeError, ValueError):
        distress_minutes = math.nan

    fitness = _clamp100(fitness_score(fitness_minutes, total_life_minutes, config))
    attention = _clamp100(attention_score(distress_minutes, total_life_minutes, config))

    raw = (
        config.weight_mood * mood
        + config.weight_hunger_inverted * hunger_inverted
        + config.weight_health * health
        + config.weight_fitness * fitness
        + config.weight_attention * attention
    )
    return ScoreBreakdown(
        score=int(_round_half_up(_clamp100(raw))),
        hunger_inverted=hunger_inverted,
        fitness=fitness,
        attention=attention,
    )


def caretaker_score(mood, hunger, health, fitness_minutes, distress_minutes,
                    life_expectancy, config=DEFAULT_SCORE_CONFIG) -> int:
    return compute_caretaker_score(
        mood, hunger, health, fitness_minutes, distress_minutes, life_expectancy, config
    ).score


def score_pet(pet, config=DEFAULT_SCORE_CONFIG) -> int:
    """Score a pet snapshot from its current vitals and lifetime timers."""
    return caretaker_score(
        pet.mood, pet.hunger, pet.health,
        pet.fitness_time, pet.distress_time, pet.life_expectancy,
        config,
    )


def qualifies_for_special(score) -> bool:
    return _clamp100(score) >= SPECIAL_SCORE


def letter_grade(score) -> str:
    """Display-only rank; the special gate uses qualifies_for_special."""
    s = _clamp100(score)
    if s >= SPECIAL_SCORE:
        return "S+"
    if s >= 90:
        return "A"
    if s >= 80:
        return "B"
    if s >= 70:
        return "C"
    if s >= 60:
        return "D"
    return "F"
