"""A tick-based virtual pet: vitals, moods, aging and a caretaker score."""
from pocketpet.actions import apply_action, clean, feed, play, sleep, toggle_radio
from pocketpet.models import Action, CauseOfDeath, Pet, PetPhase, PetStatus, Species, create_pet
from pocketpet.scheduler import PetSession, catch_up
from pocketpet.scoring import caretaker_score, letter_grade, qualifies_for_special
from pocketpet.simulation import advance

__version__ = "0.1.0"
