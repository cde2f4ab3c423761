import logging

from pocketpet.constants import (
    DANCE_EFFECT,
    ENERGY_LOW,
    FATAL_MINUTES,
    HUNGER_FULL,
    HUNGER_STARVING,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    MOOD_LOW,
    NAP_MINUTES,
    NEGLECT_MINUTES,
    NIGHT_SLEEP_MINUTES,
    PLAY_MIN_ENERGY,
    SPECIAL_BONUS_YEARS,
    VITAL_MAX,
)
from pocketpet.models import CauseOfDeath, PetStatus, clamp
from pocketpet.scoring import qualifies_for_special, score_pet

logger = logging.getLogger(__name__)


def advance(pet):
    """Simulate exactly one game minute and return the next snapshot.

    Dead pets come back untouched (the very same object).
    """
    if pet.dead:
        return pet

    nxt = pet.copy()

    # 1. Time advancement
    nxt.minute_of_day = (nxt.minute_of_day + 1) % MINUTES_PER_DAY
    nxt.age_progress += 1

    # 2. A full day is one pet year
    if nxt.age_progress >= MINUTES_PER_DAY:
        nxt.age += 1
        nxt.age_progress = 0
        if _end_of_life(nxt):
            return nxt

    # 3. Timers
    _update_timers(nxt)

    # 4. Hourly decay and neglect
    if nxt.minute_of_day % MINUTES_PER_HOUR == 0:
        _hourly_pass(nxt)

    # 5. Auto-wake
    if nxt.status == PetStatus.SLEEPING:
        duration = NIGHT_SLEEP_MINUTES if nxt.is_night else NAP_MINUTES
        if nxt.sleep_time >= duration:
            _transition(nxt, PetStatus.IDLE)
            nxt.sleep_time = 0

    # 6. Too tired to keep playing
    if nxt.status == PetStatus.PLAYING and nxt.energy <= PLAY_MIN_ENERGY:
        _transition(nxt, PetStatus.IDLE)

    # 7. Death
    cause = death_cause(nxt)
    if cause is not None:
        _die(nxt, cause)

    return nxt


def is_in_need(pet) -> bool:
    """True while the pet is whining for something the caretaker hasn't fixed."""
    return (
        pet.hunger >= HUNGER_STARVING
        or pet.energy <= ENERGY_LOW
        or pet.mood <= MOOD_LOW
        or is_angry(pet)
    )


def is_angry(pet) -> bool:
    return pet.mood == 0 and pet.low_mood_time >= NEGLECT_MINUTES


def neglect_reason(pet):
    """First neglect condition that holds, in priority order, or None.

    Only one of these ever costs health in a given hour.
    """
    if pet.starving_time >= NEGLECT_MINUTES or pet.hunger == VITAL_MAX:
        return "starving"
    if pet.overfull_time >= NEGLECT_MINUTES:
        return "overfed"
    if pet.status == PetStatus.VOMITING or pet.sick_time >= NEGLECT_MINUTES:
        return "sick"
    if pet.dirty_time >= NEGLECT_MINUTES:
        return "dirty"
    if is_angry(pet):
        return "angry"
    if pet.weight == 0 or pet.weight == VITAL_MAX:
        return "weight"
    return None


def death_cause(pet):
    if pet.health <= 0:
        return CauseOfDeath.ILLNESS
    if pet.hunger == VITAL_MAX and pet.starving_time >= FATAL_MINUTES:
        return CauseOfDeath.STARVATION
    if pet.low_mood_time >= FATAL_MINUTES:
        return CauseOfDeath.HEARTBREAK
    return None


def _end_of_life(pet) -> bool:
    """Old-age evaluation at the start of a new year. Returns True if the pet died."""
    if pet.age < pet.life_expectancy:
        return False

    if pet.special:
        _die(pet, CauseOfDeath.OLD_AGE)
        return True

    pet.caretaker_score = score_pet(pet)
    if qualifies_for_special(pet.caretaker_score):
        pet.special = True
        pet.life_expectancy += SPECIAL_BONUS_YEARS
        logger.info("%s entered the special phase (score %d), life expectancy now %d",
                    pet.name, pet.caretaker_score, pet.life_expectancy)
        return False

    _die(pet, CauseOfDeath.OLD_AGE)
    return True


def _bump(counter, condition):
    return counter + 1 if condition else 0


def _update_timers(pet):
    pet.starving_time = _bump(pet.starving_time, pet.hunger >= HUNGER_STARVING)
    pet.overfull_time = _bump(pet.overfull_time, pet.hunger <= HUNGER_FULL)
    pet.low_mood_time = _bump(pet.low_mood_time, pet.mood <= MOOD_LOW)
    pet.dirty_time = _bump(pet.dirty_time, pet.dirty)
    pet.sick_time = _bump(pet.sick_time, pet.sick)
    pet.sleep_time = _bump(pet.sleep_time, pet.status == PetStatus.SLEEPING)

    # Lifetime totals, never reset
    if pet.status == PetStatus.PLAYING:
        pet.fitness_time += 1
    if is_in_need(pet):
        pet.distress_time += 1


def _hourly_pass(pet):
    if pet.status not in (PetStatus.SLEEPING, PetStatus.DEAD):
        pet.hunger = clamp(pet.hunger + 1)
        pet.energy = clamp(pet.energy - 1)
        pet.mood = clamp(pet.mood - 1)

        if pet.status == PetStatus.DANCING:
            for vital, delta in DANCE_EFFECT.items():
                setattr(pet, vital, clamp(getattr(pet, vital) + delta))

    reason = neglect_reason(pet)
    if reason is not None:
        pet.penalty_count += 1
        pet.health = clamp(pet.health - 1)
        logger.debug("%s neglect penalty (%s), health %.0f", pet.name, reason, pet.health)
    else:
        pet.health = clamp(pet.health + 1)


def _transition(pet, new_status):
    if pet.status != new_status:
        logger.debug("%s transitioning from %s to %s", pet.name, pet.status.name, new_status.name)
        pet.status = new_status


def _die(pet, cause):
    _transition(pet, PetStatus.DEAD)
    pet.dead = True
    pet.cause_of_death = cause
    logger.info("%s died at age %d (%s)", pet.name, pet.age, cause.value)
