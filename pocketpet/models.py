import logging
import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Optional

from pocketpet.constants import (
    DAY_PHASE_LIMIT,
    INITIAL_VITALS,
    LIFE_EXPECTANCY,
    START_MINUTE_OF_DAY,
    VITAL_MAX,
    VITAL_MIN,
)

logger = logging.getLogger(__name__)


def clamp(value, low=VITAL_MIN, high=VITAL_MAX):
    return max(low, min(high, value))


class PetStatus(Enum):
    """
    The eight mutually exclusive activities a pet can be in.
    Includes logic to handle save data written by older builds.
    """
    IDLE = auto()
    EATING = auto()
    POOPING = auto()
    PLAYING = auto()
    SLEEPING = auto()
    VOMITING = auto()
    DANCING = auto()
    DEAD = auto()

    @classmethod
    def _missing_(cls, value):
        """
        Flexible lookup for stored status names ('Idle', 'sleeping', 'SICK' ...).
        Names that no longer exist map to IDLE instead of failing the load.
        """
        if isinstance(value, str):
            normalized = value.replace('-', '_').strip().upper()

            for member in cls:
                if member.name == normalized:
                    return member

            logger.warning("Mapping unknown status '%s' to IDLE.", value)
            return cls.IDLE

        return super()._missing_(value)


class PetPhase(Enum):
    BABY = "Baby"
    TODDLER = "Toddler"
    TEEN = "Teen"
    ADULT = "Adult"
    SPECIAL = "Special"


class Species(Enum):
    FOX = "Fox"
    AXOLOTL = "Axolotl"

    @property
    def label(self):
        return self.value

    @property
    def life_expectancy(self):
        return LIFE_EXPECTANCY[self.name]


class CauseOfDeath(Enum):
    OLD_AGE = "Old Age"
    ILLNESS = "Illness"
    STARVATION = "Starvation"
    HEARTBREAK = "Heartbreak"


class Action(Enum):
    FEED = auto()
    PLAY = auto()
    SLEEP = auto()
    CLEAN = auto()
    TOGGLE_RADIO = auto()


def phase_for_age(age: int, life_expectancy: int) -> PetPhase:
    """Baby below L/4, Toddler below L/2, Teen below 3L/4 (all rounded up), then Adult."""
    if age < math.ceil(life_expectancy / 4):
        return PetPhase.BABY
    if age < math.ceil(life_expectancy / 2):
        return PetPhase.TODDLER
    if age < math.ceil(3 * life_expectancy / 4):
        return PetPhase.TEEN
    return PetPhase.ADULT


@dataclass
class Pet:
    """
    One creature's full snapshot. Simulation and actions never mutate a Pet
    in place; they hand back a modified copy (see Pet.copy).
    """
    # Identity
    name: str = "Pet"
    species: Species = Species.FOX
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    birth_time: float = 0.0
    last_simulated_at: float = 0.0
    life_expectancy: int = LIFE_EXPECTANCY["FOX"]
    age: int = 0

    status: PetStatus = PetStatus.IDLE

    # Vitals (0 - 100)
    hunger: float = INITIAL_VITALS['hunger']
    mood: float = INITIAL_VITALS['mood']
    energy: float = INITIAL_VITALS['energy']
    weight: float = INITIAL_VITALS['weight']
    health: float = INITIAL_VITALS['health']

    # Flags
    special: bool = False
    sick: bool = False
    dirty: bool = False
    dead: bool = False

    # Counters
    mess_count: int = 0
    lifetime_mess_count: int = 0
    meals_since_mess: int = 0
    penalty_count: int = 0

    # Timers (game minutes)
    minute_of_day: int = START_MINUTE_OF_DAY
    age_progress: int = 0
    starving_time: int = 0
    overfull_time: int = 0
    low_mood_time: int = 0
    fitness_time: int = 0
    distress_time: int = 0
    dirty_time: int = 0
    sick_time: int = 0
    sleep_time: int = 0

    radio_on: bool = False

    caretaker_score: int = 0
    cause_of_death: Optional[CauseOfDeath] = None
    # Real time (epoch seconds) of the game minute the pet died in
    died_at: Optional[float] = None

    @property
    def phase(self) -> PetPhase:
        if self.special:
            return PetPhase.SPECIAL
        return phase_for_age(self.age, self.life_expectancy)

    @property
    def is_night(self) -> bool:
        return self.minute_of_day >= DAY_PHASE_LIMIT

    def copy(self, **changes) -> "Pet":
        return replace(self, **changes)

    def vitals(self) -> dict:
        return {
            'hunger': self.hunger,
            'mood': self.mood,
            'energy': self.energy,
            'weight': self.weight,
            'health': self.health,
        }


def create_pet(name: str, species: Species = Species.FOX, now: float = 0.0) -> Pet:
    """A newborn pet with the fixed starting vitals, simulated up to `now`."""
    return Pet(
        name=name,
        species=species,
        birth_time=now,
        last_simulated_at=now,
        life_expectancy=species.life_expectancy,
    )
