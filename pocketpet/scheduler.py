import logging
import math
import time

from pocketpet.actions import apply_action
from pocketpet.constants import MAX_CATCHUP_MINUTES, SECONDS_PER_GAME_MINUTE
from pocketpet.models import Species, create_pet
from pocketpet.simulation import advance

logger = logging.getLogger(__name__)


def minutes_elapsed(pet, now, seconds_per_minute=SECONDS_PER_GAME_MINUTE):
    """Whole game minutes between the pet's last simulation and `now`."""
    return math.floor((now - pet.last_simulated_at) / seconds_per_minute)


def catch_up(pet, now, seconds_per_minute=SECONDS_PER_GAME_MINUTE,
             max_minutes=MAX_CATCHUP_MINUTES):
    """Replay the game minutes that passed in real time since the last run.

    At most `max_minutes` are simulated; anything beyond is dropped for good
    because last_simulated_at always moves to `now`. A pet that dies during
    the replay gets died_at set to the real time of that minute.
    """
    minutes = minutes_elapsed(pet, now, seconds_per_minute)
    if minutes <= 0:
        return pet
    if pet.dead:
        return pet.copy(last_simulated_at=now)

    steps = min(minutes, max_minutes)
    if steps < minutes:
        logger.warning("%s was away for %d game minutes, simulating only %d",
                       pet.name, minutes, steps)

    current = pet
    simulated = 0
    while simulated < steps and not current.dead:
        current = advance(current)
        simulated += 1

    if current is pet:
        current = pet.copy()
    if current.dead and current.died_at is None:
        current.died_at = pet.last_simulated_at + simulated * seconds_per_minute
    current.last_simulated_at = now
    logger.debug("%s caught up %d minute(s)", pet.name, simulated)
    return current


class PetSession:
    """All loaded pets plus which one is active.

    Owned by whoever drives the game (the front end, a test); nothing here is
    global. Only the active pet is simulated, the others keep their
    last_simulated_at and catch up once they become active again.
    """

    def __init__(self, pets=None, active_id=None, on_change=None,
                 seconds_per_minute=SECONDS_PER_GAME_MINUTE):
        self.pets = dict(pets or {})
        self.active_id = active_id if active_id in self.pets else None
        self.on_change = on_change
        self.seconds_per_minute = seconds_per_minute

    @property
    def active_pet(self):
        if self.active_id is None:
            return None
        return self.pets.get(self.active_id)

    def create_pet(self, name, species=Species.FOX, now=None):
        now = time.time() if now is None else now
        pet = create_pet(name, species, now)
        self.pets[pet.id] = pet
        self.active_id = pet.id
        logger.info("Created %s the %s (%s)", pet.name, species.label, pet.id)
        self._publish(pet)
        return pet

    def set_active(self, pet_id):
        if pet_id not in self.pets:
            logger.warning("Cannot activate unknown pet %s", pet_id)
            return
        self.active_id = pet_id

    def delete_pet(self, pet_id):
        pet = self.pets.pop(pet_id, None)
        if pet is None:
            logger.warning("Cannot delete unknown pet %s", pet_id)
            return None
        if self.active_id == pet_id:
            self.active_id = None
        logger.info("Deleted %s (%s)", pet.name, pet_id)
        return pet

    def update(self, pet):
        """Publish a new snapshot. Unchanged (identical) snapshots are ignored."""
        current = self.pets.get(pet.id)
        if current is pet:
            return pet
        self.pets[pet.id] = pet
        self._publish(pet)
        return pet

    def perform(self, action):
        """Run a user action on the active pet. Returns the resulting snapshot."""
        pet = self.active_pet
        if pet is None:
            return None
        return self.update(apply_action(pet, action))

    def tick(self, now=None):
        """Advance the active pet to `now`. Cheap to call every frame."""
        pet = self.active_pet
        if pet is None:
            return None
        now = time.time() if now is None else now
        caught_up = catch_up(pet, now, self.seconds_per_minute)
        if pet.dead:
            # Only the clock moved; nothing worth saving
            self.pets[pet.id] = caught_up
            return caught_up
        return self.update(caught_up)

    def _publish(self, pet):
        if self.on_change is not None:
            self.on_change(pet)
