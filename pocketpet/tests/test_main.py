import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from pocketpet.main import GameEngine, background_color  # noqa: E402
from pocketpet.models import PetStatus, Species  # noqa: E402
from pocketpet.constants import COLOR_DAY_BG, COLOR_NIGHT_BG  # noqa: E402


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def press(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": key, "mod": 0, "unicode": "", "scancode": 0}))


def test_new_engine_adopts_a_pet(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    assert eng.pet is not None
    assert eng.pet.name == "Bobo"
    eng.step()
    eng.db.close()


def test_keyboard_feeds_the_pet(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    press(pygame.K_f)
    eng.step()
    assert eng.pet.status == PetStatus.EATING
    assert eng.pet.hunger == 40
    eng.db.close()


def test_button_click_toggles_radio(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    rect = next(r for r, label, _ in eng.buttons if label == "RADIO")
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"pos": rect.center, "button": 1}))
    eng.step()
    assert eng.pet.status == PetStatus.DANCING
    eng.db.close()


def test_frames_advance_game_time_and_persist(tmp_path):
    clock = FakeClock()
    db_path = str(tmp_path / "pets.db")
    eng = GameEngine(db_path=db_path, clock=clock)
    start = eng.pet.minute_of_day
    clock.now += 60 * 0.25 * 10  # well past the save interval too
    eng.step()
    assert eng.pet.minute_of_day > start
    eng.save()
    pet_id = eng.pet.id
    eng.db.close()

    again = GameEngine(db_path=db_path, clock=clock)
    assert again.pet.id == pet_id
    assert again.pet.minute_of_day == eng.pet.minute_of_day
    again.db.close()


def test_dead_pet_shows_summary_and_can_be_replaced(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    eng.session.update(eng.pet.copy(dead=True, status=PetStatus.DEAD))
    dead_id = eng.pet.id
    eng.step()
    press(pygame.K_n)
    eng.step()
    assert eng.pet.id != dead_id
    assert not eng.pet.dead
    assert dead_id in eng.session.pets
    eng.db.close()


def test_background_follows_the_clock():
    assert background_color(12 * 60) == COLOR_DAY_BG
    assert background_color(2 * 60) == COLOR_NIGHT_BG


def test_axolotl_can_be_adopted_after_a_death(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    eng.session.update(eng.pet.copy(dead=True, status=PetStatus.DEAD))
    press(pygame.K_a)
    eng.step()
    assert eng.pet.species == Species.AXOLOTL
    assert eng.pet.life_expectancy == 15
    assert not eng.pet.dead
    eng.db.close()


def test_adoption_keys_ignored_while_the_pet_lives(tmp_path):
    eng = GameEngine(db_path=str(tmp_path / "pets.db"), clock=FakeClock())
    pet_id = eng.pet.id
    press(pygame.K_a)
    press(pygame.K_n)
    eng.step()
    assert eng.pet.id == pet_id
    assert len(eng.session.pets) == 1
    eng.db.close()
