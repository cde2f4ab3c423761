"""User actions.

Every handler takes a pet and returns a pet. An action the pet can't take
right now hands back the very same object, so callers detect a no-op with
``result is pet``.
"""
from pocketpet.constants import (
    CLEAN_MOOD_BONUS,
    FEED_EFFECT,
    PLAY_MIN_ENERGY,
    SLEEP_EFFECT,
)
from pocketpet.models import Action, PetStatus, clamp

S = PetStatus

# Next status for the toggle actions, keyed by current status. None means the
# action is refused in that status.
PLAY_TRANSITIONS = {
    S.IDLE: S.PLAYING,
    S.EATING: S.PLAYING,
    S.POOPING: S.PLAYING,
    S.PLAYING: S.IDLE,
    S.SLEEPING: None,
    S.VOMITING: S.PLAYING,
    S.DANCING: S.PLAYING,
    S.DEAD: None,
}

SLEEP_TRANSITIONS = {
    S.IDLE: S.SLEEPING,
    S.EATING: S.SLEEPING,
    S.POOPING: S.SLEEPING,
    S.PLAYING: S.SLEEPING,
    S.SLEEPING: S.IDLE,
    S.VOMITING: S.SLEEPING,
    S.DANCING: S.SLEEPING,
    S.DEAD: None,
}

# Radio, keyed by (current status, radio turning on)
RADIO_TRANSITIONS = {
    (S.IDLE, True): S.DANCING,
    (S.IDLE, False): S.IDLE,
    (S.EATING, True): S.EATING,
    (S.EATING, False): S.EATING,
    (S.POOPING, True): S.POOPING,
    (S.POOPING, False): S.POOPING,
    (S.PLAYING, True): S.PLAYING,
    (S.PLAYING, False): S.PLAYING,
    (S.SLEEPING, True): S.SLEEPING,
    (S.SLEEPING, False): S.SLEEPING,
    (S.VOMITING, True): S.VOMITING,
    (S.VOMITING, False): S.VOMITING,
    (S.DANCING, True): S.DANCING,
    (S.DANCING, False): S.IDLE,
    (S.DEAD, True): None,
    (S.DEAD, False): None,
}


def _is_dead(pet):
    return pet.dead or pet.status == S.DEAD


def _apply_effect(pet, effect):
    for vital, delta in effect.items():
        setattr(pet, vital, clamp(getattr(pet, vital) + delta))


def feed(pet):
    if _is_dead(pet) or pet.status == S.SLEEPING:
        return pet
    if pet.hunger <= 0:
        return pet

    nxt = pet.copy(status=S.EATING, meals_since_mess=pet.meals_since_mess + 1)
    _apply_effect(nxt, FEED_EFFECT)
    return nxt


def play(pet):
    """Start playing, or stop if already playing. Needs some energy to start."""
    if _is_dead(pet):
        return pet
    target = PLAY_TRANSITIONS[pet.status]
    if target is None:
        return pet
    if target == S.PLAYING and pet.energy <= PLAY_MIN_ENERGY:
        return pet
    return pet.copy(status=target)


def sleep(pet):
    """Toggle sleep. Going to bed clean cures sickness."""
    if _is_dead(pet):
        return pet
    target = SLEEP_TRANSITIONS[pet.status]
    if target is None:
        return pet
    if target != S.SLEEPING:
        return pet.copy(status=target)

    nxt = pet.copy(status=target)
    _apply_effect(nxt, SLEEP_EFFECT)
    if nxt.sick and not nxt.dirty:
        nxt.sick = False
        nxt.sick_time = 0
    return nxt


def clean(pet):
    if _is_dead(pet):
        return pet
    return pet.copy(
        mess_count=0,
        dirty=False,
        dirty_time=0,
        mood=clamp(pet.mood + CLEAN_MOOD_BONUS),
    )


def toggle_radio(pet):
    if _is_dead(pet):
        return pet
    radio_on = not pet.radio_on
    target = RADIO_TRANSITIONS[(pet.status, radio_on)]
    if target is None:
        return pet
    return pet.copy(radio_on=radio_on, status=target)


HANDLERS = {
    Action.FEED: feed,
    Action.PLAY: play,
    Action.SLEEP: sleep,
    Action.CLEAN: clean,
    Action.TOGGLE_RADIO: toggle_radio,
}


def apply_action(pet, action):
    return HANDLERS[Action(action)](pet)
