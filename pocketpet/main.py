#!/usr/bin/env python3
import logging
import sys
import time

import pygame

from pocketpet.constants import (
    COLOR_BTN,
    COLOR_DAWN_BG,
    COLOR_DAY_BG,
    COLOR_DUSK_BG,
    COLOR_ENERGY,
    COLOR_HEALTH,
    COLOR_HUNGER,
    COLOR_MOOD,
    COLOR_NIGHT_BG,
    COLOR_TEXT,
    COLOR_UI_BAR_BG,
    COLOR_WEIGHT,
    DB_FILE,
    FPS,
    SAVE_INTERVAL_SECONDS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
)
from pocketpet.database import DatabaseManager
from pocketpet.logging_config import configure_logging
from pocketpet.models import Action, Species
from pocketpet.pet_sprite import PetSprite
from pocketpet.summary import format_summary, summarize_life

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    pygame.K_f: Action.FEED,
    pygame.K_p: Action.PLAY,
    pygame.K_s: Action.SLEEP,
    pygame.K_c: Action.CLEAN,
    pygame.K_r: Action.TOGGLE_RADIO,
}

# Adoption keys on the summary screen
NEW_PET_KEYS = {
    pygame.K_n: ("Bobo", Species.FOX),
    pygame.K_a: ("Axel", Species.AXOLOTL),
}

STAT_BARS = [
    ("HUNGER", "hunger", COLOR_HUNGER),
    ("MOOD", "mood", COLOR_MOOD),
    ("ENERGY", "energy", COLOR_ENERGY),
    ("WEIGHT", "weight", COLOR_WEIGHT),
    ("HEALTH", "health", COLOR_HEALTH),
]


def background_color(minute_of_day):
    hour = minute_of_day // 60
    if 5 <= hour < 7:
        return COLOR_DAWN_BG
    if 7 <= hour < 18:
        return COLOR_DAY_BG
    if 18 <= hour < 21:
        return COLOR_DUSK_BG
    return COLOR_NIGHT_BG


class GameEngine:
    """Owns the window, the pet session and its database; one step() per frame."""
    def __init__(self, db_path=DB_FILE, clock=time.time):
        pygame.init()

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Pocket Pet")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 16)
        self.big_font = pygame.font.Font(None, 28)
        self.now = clock

        self.db = DatabaseManager(db_path)
        self.session = self.db.load_session(on_change=self._mark_unsaved)
        self._unsaved = set()
        if self.session.active_pet is None:
            self.new_pet()

        self.sprite = PetSprite()
        self.running = True
        self._last_step_time = time.time()
        self._last_save = self.now()

        self.pet_center_x, self.pet_center_y = SCREEN_WIDTH // 2, SCREEN_HEIGHT - 110

        self.buttons = []
        labels = [("FEED", Action.FEED), ("PLAY", Action.PLAY), ("SLEEP", Action.SLEEP),
                  ("CLEAN", Action.CLEAN), ("RADIO", Action.TOGGLE_RADIO)]
        for i, (label, action) in enumerate(labels):
            rect = pygame.Rect(20 + i * 90, SCREEN_HEIGHT - 30, 80, 22)
            self.buttons.append((rect, label, action))

    @property
    def pet(self):
        return self.session.active_pet

    def _mark_unsaved(self, pet):
        self._unsaved.add(pet.id)

    def new_pet(self, name="Bobo", species=Species.FOX):
        pet = self.session.create_pet(name, species, now=self.now())
        self.save()
        return pet

    def delete_active_pet(self):
        pet = self.pet
        if pet is None:
            return
        self.session.delete_pet(pet.id)
        self._unsaved.discard(pet.id)
        self.db.delete_pet(pet.id)
        if self.session.pets:
            self.session.set_active(next(iter(self.session.pets)))
        self.db.set_active_pet(self.session.active_id)

    def cycle_active_pet(self):
        ids = list(self.session.pets)
        if len(ids) < 2:
            return
        current = ids.index(self.session.active_id) if self.session.active_id in ids else -1
        self.session.set_active(ids[(current + 1) % len(ids)])
        self.db.set_active_pet(self.session.active_id)

    def handle_action(self, action):
        before = self.pet
        after = self.session.perform(action)
        if after is before:
            logger.debug("%s ignored while %s", action.name, before.status.name if before else "no pet")
        return after

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_ACTIONS:
                self.handle_action(KEY_ACTIONS[event.key])
            elif event.key in NEW_PET_KEYS and (self.pet is None or self.pet.dead):
                self.new_pet(*NEW_PET_KEYS[event.key])
            elif event.key == pygame.K_DELETE:
                self.delete_active_pet()
            elif event.key == pygame.K_TAB:
                self.cycle_active_pet()
            elif event.key == pygame.K_ESCAPE:
                self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for rect, _label, action in self.buttons:
                if rect.collidepoint(event.pos):
                    self.handle_action(action)

    def save(self, force=True):
        now = self.now()
        if not force and now - self._last_save < SAVE_INTERVAL_SECONDS:
            return
        for pet_id in list(self._unsaved):
            pet = self.session.pets.get(pet_id)
            if pet is not None:
                self.db.save_pet(pet)
        self._unsaved.clear()
        self.db.set_active_pet(self.session.active_id)
        self._last_save = now

    def step(self):
        """One frame: input, catch-up, periodic save, draw."""
        real_now = time.time()
        dt = real_now - self._last_step_time
        self._last_step_time = real_now

        for event in pygame.event.get():
            self.handle_event(event)

        self.session.tick(self.now())
        if self.pet is not None:
            self.sprite.update(dt, self.pet)
        self.save(force=False)
        self.draw()

    def draw(self):
        pet = self.pet
        self.screen.fill(background_color(pet.minute_of_day) if pet else COLOR_UI_BAR_BG)
        if pet is None:
            self._blit_text("No pet. N: fox   A: axolotl", (20, 20), self.big_font)
            pygame.display.flip()
            return

        if pet.dead:
            self._draw_summary(pet)
            self.sprite.draw(self.screen, pet, SCREEN_WIDTH - 80, SCREEN_HEIGHT - 80, self.font)
        else:
            self._draw_stats(pet)
            self.sprite.draw(self.screen, pet, self.pet_center_x, self.pet_center_y, self.font)
            self._draw_buttons()
        pygame.display.flip()

    def _blit_text(self, text, pos, font=None, color=COLOR_TEXT):
        surf = (font or self.font).render(text, True, color)
        self.screen.blit(surf, pos)

    def _draw_stats(self, pet):
        hours, minutes = divmod(pet.minute_of_day, 60)
        header = f"{pet.name}  Age {pet.age} ({pet.phase.value})  {hours:02d}:{minutes:02d}  {pet.status.name}"
        self._blit_text(header, (10, 8), color=WHITE)
        for i, (label, attr, color) in enumerate(STAT_BARS):
            y = 28 + i * 16
            self._blit_text(label, (10, y))
            bar = pygame.Rect(70, y, 120, 10)
            pygame.draw.rect(self.screen, COLOR_UI_BAR_BG, bar)
            fill = bar.copy()
            fill.width = int(bar.width * getattr(pet, attr) / 100.0)
            pygame.draw.rect(self.screen, color, fill)
        flags = [name for name, on in (("SICK", pet.sick), ("DIRTY", pet.dirty),
                                       ("RADIO", pet.radio_on), ("SPECIAL", pet.special)) if on]
        if flags:
            self._blit_text(" ".join(flags), (10, 28 + len(STAT_BARS) * 16), color=WHITE)

    def _draw_buttons(self):
        for rect, label, _action in self.buttons:
            pygame.draw.rect(self.screen, COLOR_BTN, rect, border_radius=4)
            text = self.font.render(label, True, WHITE)
            self.screen.blit(text, text.get_rect(center=rect.center))

    def _draw_summary(self, pet):
        self._blit_text("GAME OVER", (20, 12), self.big_font, color=(255, 0, 0))
        for i, line in enumerate(format_summary(summarize_life(pet))):
            self._blit_text(line, (20, 44 + i * 18), color=WHITE)
        self._blit_text("N: fox   A: axolotl   DEL: remove   TAB: switch pet", (20, SCREEN_HEIGHT - 24))

    def run(self):
        try:
            while self.running:
                self.step()
                self.clock.tick(FPS)
        finally:
            self.save()
            self.db.close()
            pygame.quit()


def main():
    configure_logging()
    GameEngine().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
